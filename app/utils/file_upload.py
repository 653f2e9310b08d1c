"""
File Upload Utility - read a resume upload and derive its storage key.

The file is buffered fully in memory. The declared content type is trusted;
application/pdf is assumed when the client sends none.
"""

import time
from typing import Optional, Tuple
from fastapi import UploadFile

from app.core.errors import ValidationError


DEFAULT_CONTENT_TYPE = "application/pdf"


def build_storage_key(filename: str, timestamp_ms: Optional[int] = None) -> str:
    """
    Object-store key: `{upload time in epoch ms}-{original filename}`.

    Two uploads of the same filename within one millisecond map to the
    same key; the later write wins in storage.
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    return f"{timestamp_ms}-{filename}"


def resolve_content_type(declared: Optional[str]) -> str:
    return declared or DEFAULT_CONTENT_TYPE


async def read_upload(file: Optional[UploadFile]) -> Tuple[bytes, str, str]:
    """
    Read an uploaded resume into memory.

    Returns:
        Tuple of (content, filename, content_type)

    Raises:
        ValidationError when no file was sent
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded.")

    content = await file.read()
    return content, file.filename, resolve_content_type(file.content_type)
