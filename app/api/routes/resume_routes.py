"""
Resume Routes

POST /upload - Upload a resume PDF (multipart field `resume`)
GET /resumes - List own resumes, newest first
PATCH /resumes/{resume_id} - Rename own resume
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from app.core.auth import get_current_user
from app.core.errors import ServerError
from app.schemas.schemas import RenameRequest, ResumeResponse
from app.services.resume_service import ResumeService, get_resume_service
from app.services.storage_service import ObjectStorage, get_storage
from app.utils.file_upload import build_storage_key, read_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Resumes"])


@router.post("/upload", response_model=ResumeResponse)
async def upload_resume(
    resume: Optional[UploadFile] = File(None, description="Resume file (PDF)"),
    user: dict = Depends(get_current_user),
    storage: ObjectStorage = Depends(get_storage),
    resumes: ResumeService = Depends(get_resume_service),
):
    """
    Upload a resume and get a shareable link.

    Process:
    1. Buffer the file in memory
    2. Store it under `{timestamp}-{filename}`
    3. Record metadata with a fresh share slug
    """
    content, filename, content_type = await read_upload(resume)
    key = build_storage_key(filename)

    try:
        storage.put_object(key, content, content_type)
    except Exception:
        logger.exception("Storage write failed for key %s", key)
        raise ServerError("Internal server error during upload.")

    try:
        return resumes.create(
            user_id=user["id"],
            file_name=filename,
            file_key=key,
            file_url=storage.public_url(key),
        )
    except Exception:
        # The object stays in the bucket with no row pointing at it
        logger.exception("Resume insert failed; orphaned object %s", key)
        raise ServerError("Internal server error during upload.")


@router.get("/resumes", response_model=List[ResumeResponse])
async def list_resumes(
    user: dict = Depends(get_current_user),
    resumes: ResumeService = Depends(get_resume_service),
):
    """Get all resumes uploaded by the current user."""
    return resumes.list_for_user(user["id"])


@router.patch("/resumes/{resume_id}", response_model=ResumeResponse)
async def rename_resume(
    resume_id: str,
    request: RenameRequest,
    user: dict = Depends(get_current_user),
    resumes: ResumeService = Depends(get_resume_service),
):
    """Rename a resume. Only the display name changes; the stored file and URL stay."""
    return resumes.rename(resume_id, user["id"], request.new_file_name)
