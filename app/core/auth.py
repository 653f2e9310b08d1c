"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT session token creation/verification
- FastAPI dependency for protected routes
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import get_settings
from app.core.errors import AuthenticationError, AuthorizationError
from app.services.user_service import get_user_by_email, get_user_by_id

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer token extractor; a missing header is reported as 401 below, not 403
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash (constant-time)."""
    if not plain_password or not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a session token carrying the user id in the `sub` claim."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode = {"sub": user_id, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def authenticate_user(email: str, password: str) -> dict:
    """
    Exchange credentials for the matching user row.

    Unknown email and wrong password fail the same way so the response
    does not reveal which accounts exist.
    """
    user = get_user_by_email(email)
    if not user or not verify_password(password, user["password_hash"]):
        raise AuthenticationError()
    return user


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    if credentials is None:
        raise AuthorizationError()

    payload = decode_token(credentials.credentials)
    if not payload:
        raise AuthorizationError("Invalid or expired token")

    user_id = payload.get("sub")
    if not user_id:
        raise AuthorizationError("Invalid or expired token")

    # Token may outlive the account row (e.g. database reset)
    user = get_user_by_id(user_id)
    if not user:
        raise AuthorizationError("Invalid or expired token")

    return {"id": user["id"], "email": user["email"], "created_at": user["created_at"]}
