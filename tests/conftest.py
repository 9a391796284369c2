import os

# Settings are read at import time; point them at throwaway values first.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("GEMINI_PROVIDER", "ai_studio")
os.environ.setdefault("GEMINI_MODEL", "gemini-2.5-flash")

import pytest
from fastapi.testclient import TestClient

from tutor.deps import get_tutor_service, get_tutor_session
from tutor.main import app
from tutor.progress import MemoryProgressStore
from tutor.state import TutorSession

GENERATE_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"


def gemini_reply(text: str) -> dict:
    """A minimal generateContent response body carrying ``text``."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeTutorService:
    """Stands in for TutorService; each attribute is the value to return or an exception to raise."""

    def __init__(self, **responses):
        self.responses = responses
        self.calls = []

    def __getattr__(self, name):
        if name not in self.responses:
            raise AttributeError(name)

        async def _call(*args):
            self.calls.append((name, args))
            value = self.responses[name]
            if isinstance(value, Exception):
                raise value
            return value

        return _call


@pytest.fixture
def store():
    return MemoryProgressStore()


@pytest.fixture
def tutor_session(store):
    return TutorSession(store)


@pytest.fixture
def fake_service():
    return FakeTutorService()


@pytest.fixture
def client(tutor_session, fake_service):
    app.dependency_overrides[get_tutor_session] = lambda: tutor_session
    app.dependency_overrides[get_tutor_service] = lambda: fake_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
