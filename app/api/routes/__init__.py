"""
API Routes - Combines all JSON route modules into single router.

HTML pages (page_routes, share_routes) are mounted separately in app.main.
"""

from fastapi import APIRouter

from app.api.routes.auth_routes import router as auth_router
from app.api.routes.resume_routes import router as resume_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(resume_router)
