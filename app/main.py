"""
Resume Share - Main Application

FastAPI backend with:
- PostgreSQL for users and resume metadata
- S3-compatible object storage for the PDFs
- JWT authentication
- Server-rendered pages for login, register and the dashboard
- Public /{slug} viewer for shared resumes

Run: uvicorn app.main:app --reload
"""

import logging

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import api_router
from app.api.routes.page_routes import router as page_router
from app.api.routes.share_routes import router as share_router
from app.core.config import get_settings
from app.core.errors import register_exception_handlers
from app.db.postgres import init_schema, test_database_connection
from app.schemas.schemas import HealthResponse
from app.services.storage_service import ObjectStorage, get_storage

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Resume Share",
    description="""
    Host PDF resumes behind short shareable links.

    ## Features
    - **Authentication**: email/password registration, JWT sessions
    - **Upload**: one PDF per request, stored in object storage
    - **Resumes**: list and rename your uploads
    - **Sharing**: anyone with `/{slug}` can view the resume
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create tables on startup."""
    init_schema()


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check(storage: ObjectStorage = Depends(get_storage)):
    """Detailed health check."""
    return HealthResponse(
        status="healthy",
        database="connected" if test_database_connection() else "disconnected",
        storage="connected" if storage.ping() else "disconnected",
    )


# Include API routes
app.include_router(api_router, prefix="/api")
app.include_router(page_router)
# Catch-all /{slug} goes last
app.include_router(share_router)
