"""
Authentication Routes

POST /register - Register new user
POST /auth/login - Exchange credentials for a session token
GET /auth/me - Get current user info
"""

import logging

from fastapi import APIRouter, Depends

from app.core.auth import authenticate_user, create_access_token, get_current_user, hash_password
from app.schemas.schemas import RegisterRequest, LoginRequest, TokenResponse, UserResponse
from app.services.user_service import create_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(request: RegisterRequest):
    """
    Register a new user account.

    The password is stored only as a bcrypt hash. Login afterwards to get a token.
    """
    return create_user(request.email, hash_password(request.password))


@router.post("/auth/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive a JWT session token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = authenticate_user(request.email, request.password)
    token = create_access_token(user["id"])
    logger.info("Issued session for user %s", user["id"])
    return TokenResponse(access_token=token, user_id=user["id"])


@router.get("/auth/me", response_model=UserResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return user
