"""
User Service - credential store access.

Users are created at registration and read at login / session checks.
This system never deletes a user.
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import DateTime, bindparam, text
from sqlalchemy.exc import IntegrityError

from app.core.errors import ConflictError
from app.db.postgres import get_db_session, utcnow

logger = logging.getLogger(__name__)


INSERT_USER = text("""
    INSERT INTO users (id, email, password_hash, created_at)
    VALUES (:id, :email, :password_hash, :created_at)
""").bindparams(bindparam("created_at", type_=DateTime()))


def get_user_by_email(email: str) -> Optional[dict]:
    """Fetch a user row (including password_hash) by email."""
    with get_db_session() as db:
        row = db.execute(
            text("SELECT id, email, password_hash, created_at FROM users WHERE email = :email"),
            {"email": email}
        ).fetchone()
    return dict(row._mapping) if row else None


def get_user_by_id(user_id: str) -> Optional[dict]:
    with get_db_session() as db:
        row = db.execute(
            text("SELECT id, email, created_at FROM users WHERE id = :id"),
            {"id": user_id}
        ).fetchone()
    return dict(row._mapping) if row else None


def create_user(email: str, password_hash: str) -> dict:
    """
    Insert a new user.

    Raises:
        ConflictError if the email is already registered
    """
    if get_user_by_email(email):
        raise ConflictError("User with this email already exists")

    user = {
        "id": str(uuid.uuid4()),
        "email": email,
        "password_hash": password_hash,
        "created_at": utcnow(),
    }
    try:
        with get_db_session() as db:
            db.execute(INSERT_USER, user)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        raise ConflictError("User with this email already exists")

    logger.info("Registered user %s", user["id"])
    return {"id": user["id"], "email": email, "created_at": user["created_at"]}
