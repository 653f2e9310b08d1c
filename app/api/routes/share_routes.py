"""
Public Share Route

GET /{slug} - Full-page viewer for a shared resume (no login required)

Must be included after every other single-segment route, since it
matches any path like /login or /health.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.api.routes.page_routes import templates
from app.services.resume_service import ResumeService, get_resume_service

router = APIRouter(tags=["Share"])


@router.get("/{slug}", response_class=HTMLResponse)
async def view_shared_resume(
    request: Request,
    slug: str,
    resumes: ResumeService = Depends(get_resume_service),
):
    """Resolve a share slug and embed the stored file."""
    resume = resumes.get_by_slug(slug)
    if not resume:
        return templates.TemplateResponse(
            request, "not_found.html", {"slug": slug}, status_code=404
        )
    return templates.TemplateResponse(request, "viewer.html", {"resume": resume})
