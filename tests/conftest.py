"""
Pytest configuration and fixtures for testing.

The database dependency is replaced by an in-memory mongomock database, so
no MongoDB server is needed. The app's startup hook (which pings a real
server) is not run because TestClient is used outside a `with` block.
"""

import asyncio
from datetime import datetime, timedelta

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from hirenow.database import get_db
from hirenow.main import app
from hirenow.utils.security import create_access_token


@pytest.fixture
def db():
    """A fresh, empty database for each test"""
    return AsyncMongoMockClient()["hirenow_test"]


@pytest.fixture
def client(db):
    """FastAPI test client with the database dependency overridden"""
    app.dependency_overrides[get_db] = lambda: db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def employer_email():
    return "hr@acme.example.com"


@pytest.fixture
def seeker_email():
    return "jane@seekers.example.com"


@pytest.fixture
def auth_headers():
    """Build an Authorization header for any email"""
    def _headers(email):
        return {"Authorization": f"Bearer {create_access_token(email)}"}
    return _headers


@pytest.fixture
def sample_job_data(employer_email):
    """Sample job posting as the frontend sends it"""
    return {
        "title": "Senior Python Developer",
        "salary": "50000",
        "location": "Remote",
        "category": "Engineering",
        "profile": {
            "companyName": "Acme",
            "email": employer_email,
        },
    }


@pytest.fixture
def seed_jobs(db):
    """Insert job documents directly, oldest first"""
    def _seed(docs):
        start = datetime(2024, 1, 1)
        for i, doc in enumerate(docs):
            doc.setdefault("_id", ObjectId())
            doc.setdefault("postedAt", start + timedelta(minutes=i))
            doc.setdefault("applied", 0)
            doc.setdefault("jobStatus", "Open")
        asyncio.run(db.jobs.insert_many(docs))
        return docs
    return _seed
