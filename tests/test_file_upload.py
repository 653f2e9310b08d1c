"""Storage key derivation, content type defaults and slugs."""

import re

from app.core.config import get_settings
from app.services.resume_service import generate_slug
from app.utils.file_upload import DEFAULT_CONTENT_TYPE, build_storage_key, resolve_content_type
from tests.conftest import upload


def test_storage_key_prefixes_timestamp():
    assert build_storage_key("r.pdf", timestamp_ms=1700000000123) == "1700000000123-r.pdf"


def test_storage_key_uses_current_time():
    assert re.fullmatch(r"\d{13}-My CV.pdf", build_storage_key("My CV.pdf"))


def test_same_name_same_millisecond_collides():
    assert build_storage_key("r.pdf", 42) == build_storage_key("r.pdf", 42)


def test_content_type_defaults_to_pdf():
    assert resolve_content_type(None) == DEFAULT_CONTENT_TYPE == "application/pdf"
    assert resolve_content_type("") == "application/pdf"
    assert resolve_content_type("image/png") == "image/png"


def test_slug_is_short_and_url_safe():
    slug = generate_slug()

    assert re.fullmatch(r"[A-Za-z0-9_-]{8}", slug)
    assert len({generate_slug() for _ in range(100)}) == 100


def test_public_url_escapes_key():
    url = get_settings().public_file_url("1700000000123-My CV #1?.pdf")

    assert url == "https://storage.test/storage/v1/object/public/resumes/1700000000123-My%20CV%20%231%3F.pdf"


def test_upload_url_for_name_with_spaces(client, alice):
    resume = upload(client, alice, filename="My CV.pdf").json()

    assert resume["fileKey"].endswith("-My CV.pdf")
    assert resume["fileUrl"].endswith("-My%20CV.pdf")
