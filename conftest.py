# conftest.py
import os

# Configure the app for tests before anything under app/ is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_ACCESS_SECRET"] = "test-access-secret-0123456789abcdefghijklmnop"
os.environ["JWT_REFRESH_SECRET"] = "test-refresh-secret-0123456789abcdefghijklmnop"
os.environ["FIREBASE_PRIVATE_KEY"] = "<from-service-account-json>"
os.environ["FIREBASE_STORAGE_BUCKET"] = "test-bucket.appspot.com"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app
from app.services.storage_service import PUBLIC_HOST, StorageService, get_storage


class FakeStorage(StorageService):
    """Keeps uploaded objects in memory instead of the bucket."""

    def __init__(self):
        super().__init__()
        self.objects = {}
        self.deleted = []

    def upload_file(self, data, filename, content_type, folder):
        url = f"https://{PUBLIC_HOST}/{self.cfg.FIREBASE_STORAGE_BUCKET}/{folder}/{filename}"
        self.objects[url] = (data, content_type)
        return url

    def delete_file(self, file_url):
        self.objects.pop(file_url, None)
        self.deleted.append(file_url)


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def client(storage):
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides[get_storage] = lambda: storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def db(client):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


ADMIN = {"email": "owner@salon.com", "password": "Str0ngPass!", "name": "Salon Owner"}


@pytest.fixture
def tokens(client):
    response = client.post("/auth/register", json=ADMIN)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['accessToken']}"}


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
