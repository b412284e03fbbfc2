"""Shared pytest fixtures for voice upload tests."""

import pytest
from fastapi.testclient import TestClient

from fakes import FakeRepository, FakeStorage, FakeTranscriptionService, make_config, make_handler
from voice_upload.dependencies import get_config, get_upload_handler
from voice_upload.main import app


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def fakes():
    """Collaborators used by the app under test; replace entries to change behaviour."""
    return {
        "transcription": FakeTranscriptionService(),
        "storage": FakeStorage(),
        "repository": FakeRepository(),
    }


@pytest.fixture
def make_client(upload_dir, fakes):
    """Build a FastAPI test client wired to the fake collaborators.

    The handler is rebuilt from ``fakes`` on every request. Dependency
    overrides are cleared after the test completes.
    """

    def _make(**config_kwargs) -> TestClient:
        app.dependency_overrides[get_config] = lambda: make_config(upload_dir, **config_kwargs)
        app.dependency_overrides[get_upload_handler] = lambda: make_handler(**fakes)
        return TestClient(app)

    yield _make

    app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def wav_bytes():
    return b"RIFF" + b"\x00" * 1020
