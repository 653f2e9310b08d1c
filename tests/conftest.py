"""Shared fixtures: SQLite database file, recording S3 client, logged-in users."""

import os
import tempfile

import pytest

# Must be set before app modules build the engine and read settings
_DB_DIR = tempfile.mkdtemp(prefix="resume-share-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["S3_BUCKET_NAME"] = "resumes"
os.environ["STORAGE_PUBLIC_BASE_URL"] = "https://storage.test"

from fastapi.testclient import TestClient
from sqlalchemy import text

from app.db.postgres import get_db_session, init_schema
from app.main import app
from app.services.storage_service import ObjectStorage, get_storage


class RecordingS3Client:
    """Stands in for the boto3 S3 client; keeps objects in a dict."""

    def __init__(self):
        self.objects = {}
        self.error = None

    def put_object(self, Bucket, Key, Body, ContentType):
        if self.error:
            raise self.error
        self.objects[(Bucket, Key)] = {"Body": Body, "ContentType": ContentType}
        return {"ETag": '"test"'}

    def head_bucket(self, Bucket):
        return {}


@pytest.fixture(autouse=True)
def clean_db():
    init_schema()
    with get_db_session() as db:
        db.execute(text("DELETE FROM resumes"))
        db.execute(text("DELETE FROM users"))
    yield


@pytest.fixture
def s3_client():
    return RecordingS3Client()


@pytest.fixture
def client(s3_client):
    app.dependency_overrides[get_storage] = lambda: ObjectStorage(client=s3_client, bucket="resumes")
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register(client, email, password="pw123456"):
    return client.post("/api/register", json={"email": email, "password": password})


def login(client, email, password="pw123456"):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def auth_headers(client, email, password="pw123456"):
    assert register(client, email, password).status_code == 201
    response = login(client, email, password)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}


def upload(client, headers, filename="r.pdf", content=b"%PDF-1.4 test", content_type="application/pdf"):
    return client.post(
        "/api/upload",
        headers=headers,
        files={"resume": (filename, content, content_type)},
    )


@pytest.fixture
def alice(client):
    return auth_headers(client, "alice@x.com")


@pytest.fixture
def bob(client):
    return auth_headers(client, "bob@x.com")
