"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
JSON field names are camelCase (fileName, shareableSlug, newFileName);
Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError
from pydantic.alias_generators import to_camel
from datetime import datetime


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# AUTH SCHEMAS
# ============================================================

class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

class LoginRequest(CamelModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        # Same normalization EmailStr applied at registration; a malformed
        # address is left as-is so login fails with 401, not 400
        try:
            return validate_email(value)[1]
        except PydanticCustomError:
            return value

class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str

class UserResponse(CamelModel):
    id: str
    email: str
    created_at: datetime


# ============================================================
# RESUME SCHEMAS
# ============================================================

class ResumeResponse(CamelModel):
    id: str
    user_id: str
    file_name: str
    file_key: str
    file_url: str
    shareable_slug: str
    created_at: datetime

class RenameRequest(CamelModel):
    new_file_name: str

    @field_validator("new_file_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Invalid file name provided.")
        return value


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    database: str
    storage: str
