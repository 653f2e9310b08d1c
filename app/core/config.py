"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List
from urllib.parse import quote
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database (DATABASE_URL wins over the postgres_* parts when set)
    database_url: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "resume_user"
    postgres_password: str = "password"
    postgres_db: str = "resume_share"

    # Object storage (S3-compatible, e.g. Supabase storage)
    s3_endpoint_url: str = ""
    s3_region: str = "ap-south-1"
    s3_access_key_id: str = ""
    s3_secret_access_key: str = ""
    s3_bucket_name: str = "resumes"
    storage_public_base_url: str = "http://localhost:54321"

    # JWT Auth
    jwt_secret_key: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 1440

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]

    @property
    def sqlalchemy_url(self) -> str:
        """Construct database connection URL"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    def public_file_url(self, key: str) -> str:
        """Public URL of an object in the resumes bucket."""
        base = self.storage_public_base_url.rstrip("/")
        return f"{base}/storage/v1/object/public/{self.s3_bucket_name}/{quote(key)}"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
