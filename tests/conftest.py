"""
Pytest configuration and fixtures.
"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from resume_intake.config import settings
from resume_intake.main import app
from resume_intake.services.record_store import ResumeRecordStore, get_record_store


SAMPLE_RESUME = """\
Name: Jane Doe
Contact Information:
Location: Seattle, WA
Phone: 555-0100
Email: jane@example.com
LinkedIn: linkedin.com/in/janedoe
Summary:
Experienced engineer.
Work Experience:
Company X, 2019-2023
Education:
BS Computer Science
Skills:
Go, distributed systems
"""


def llm_reply(content):
    """Build an object shaped like a LiteLLM completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=None,
    )


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def store(tmp_path):
    return ResumeRecordStore(tmp_path / "resume_records.yaml")


@pytest.fixture
def no_server_keys(monkeypatch):
    monkeypatch.setattr(settings, "groq_api_key", None)
    monkeypatch.setattr(settings, "gemini_api_key", None)
    monkeypatch.setattr(settings, "openrouter_api_key", None)


@pytest.fixture
def client(store, no_server_keys):
    app.dependency_overrides[get_record_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
