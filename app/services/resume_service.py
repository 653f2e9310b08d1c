"""
Resume Service - registry of uploaded resume metadata.

Each row points at one object in storage:
- file_name:      display name, the only mutable field (rename)
- file_key:       object-store key, fixed at upload
- file_url:       public URL derived from file_key
- shareable_slug: random token used by the public /{slug} viewer

Ownership: only resumes.user_id may rename a row. Public slug lookups
ignore ownership entirely.
"""

import logging
import secrets
import uuid
from typing import List, Optional

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.exc import IntegrityError

from app.core.errors import ForbiddenError, NotFoundError
from app.db.postgres import get_db_session, utcnow

logger = logging.getLogger(__name__)


SLUG_BYTES = 6  # 8 URL-safe characters
SLUG_ATTEMPTS = 5

RESUME_COLUMNS = "id, user_id, file_name, file_key, file_url, shareable_slug, created_at"

INSERT_RESUME = text("""
    INSERT INTO resumes (id, user_id, file_name, file_key, file_url, shareable_slug, created_at)
    VALUES (:id, :user_id, :file_name, :file_key, :file_url, :shareable_slug, :created_at)
""").bindparams(bindparam("created_at", type_=DateTime()))


def generate_slug() -> str:
    """Short opaque token for share links."""
    return secrets.token_urlsafe(SLUG_BYTES)


class ResumeService:
    """
    CRUD accessor over the resumes table.
    """

    def create(self, user_id: str, file_name: str, file_key: str, file_url: str) -> dict:
        """
        Insert a resume row for an object already written to storage.

        Returns:
            The created row as a dict
        """
        resume = {
            "id": str(uuid.uuid4()),
            "user_id": user_id,
            "file_name": file_name,
            "file_key": file_key,
            "file_url": file_url,
            "created_at": utcnow(),
        }
        for attempt in range(1, SLUG_ATTEMPTS + 1):
            resume["shareable_slug"] = generate_slug()
            try:
                with get_db_session() as db:
                    db.execute(INSERT_RESUME, resume)
                return resume
            except IntegrityError:
                if attempt == SLUG_ATTEMPTS or self.get_by_slug(resume["shareable_slug"]) is None:
                    raise
                logger.warning("Slug collision on %s, retrying", resume["shareable_slug"])

    def list_for_user(self, user_id: str) -> List[dict]:
        """All resumes owned by user_id, newest first."""
        with get_db_session() as db:
            result = db.execute(
                text(f"SELECT {RESUME_COLUMNS} FROM resumes WHERE user_id = :user_id ORDER BY created_at DESC"),
                {"user_id": user_id}
            )
            return [dict(row._mapping) for row in result.fetchall()]

    def get_by_id(self, resume_id: str) -> Optional[dict]:
        with get_db_session() as db:
            row = db.execute(
                text(f"SELECT {RESUME_COLUMNS} FROM resumes WHERE id = :id"),
                {"id": resume_id}
            ).fetchone()
        return dict(row._mapping) if row else None

    def get_by_slug(self, slug: str) -> Optional[dict]:
        with get_db_session() as db:
            row = db.execute(
                text(f"SELECT {RESUME_COLUMNS} FROM resumes WHERE shareable_slug = :slug"),
                {"slug": slug}
            ).fetchone()
        return dict(row._mapping) if row else None

    def rename(self, resume_id: str, user_id: str, new_file_name: str) -> dict:
        """
        Change the display name of a resume owned by user_id.

        Raises:
            NotFoundError if the resume does not exist
            ForbiddenError if it belongs to someone else
        """
        resume = self.get_by_id(resume_id)
        if not resume:
            raise NotFoundError("Resume not found.")
        if resume["user_id"] != user_id:
            raise ForbiddenError()

        with get_db_session() as db:
            db.execute(
                text("UPDATE resumes SET file_name = :file_name WHERE id = :id"),
                {"file_name": new_file_name, "id": resume_id}
            )

        resume["file_name"] = new_file_name
        return resume


# Singleton instance
_resume_service: ResumeService = None


def get_resume_service() -> ResumeService:
    """Get or create the resume service (singleton pattern)"""
    global _resume_service
    if _resume_service is None:
        _resume_service = ResumeService()
    return _resume_service
