from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from lessons_api.app.core.config import Settings
from lessons_api.app.core.db import LessonStore
from lessons_api.app.main import create_app


@pytest.fixture()
def store() -> LessonStore:
    """In-memory store backed by mongomock; a fresh database per test."""
    return LessonStore(AsyncMongoMockClient(), "edushop_test")


@pytest.fixture()
def images_dir(tmp_path: Path) -> Path:
    path = tmp_path / "images"
    path.mkdir()
    return path


@pytest.fixture()
def client(store: LessonStore, images_dir: Path) -> TestClient:
    app = create_app(store=store, app_settings=Settings(images_dir=str(images_dir)))
    return TestClient(app)


@pytest.fixture()
def make_lessons(client: TestClient):
    """Create lessons through the API and return their identifiers."""

    def _make(*lessons: dict) -> list[str]:
        response = client.post("/api/lessons", json=list(lessons))
        assert response.status_code == 201
        return response.json()["result"]["insertedIds"]

    return _make
