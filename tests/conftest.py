"""Pytest configuration and shared fixtures."""

import json
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app
import app.llm.router as llm_router


PODCAST_PLAN = {
    "projectSummary": "Launch a weekly interview podcast and grow an audience.",
    "toolGroups": [
        {
            "groupName": "Content Creation",
            "purpose": "Record and edit episodes with studio quality.",
            "tools": [
                {
                    "name": "Riverside",
                    "role": "Records remote interviews in high quality.",
                    "url": "https://riverside.fm",
                    "instructions": {
                        "setupSteps": ["Create an account.", "Set up a recording studio link."],
                        "usageSteps": [
                            "Invite the guest via the studio link.",
                            "Record separate audio tracks.",
                            "Export the tracks for editing.",
                        ],
                    },
                },
                {
                    "name": "Descript",
                    "role": "Edits audio by editing the transcript.",
                    "url": "https://www.descript.com",
                    "instructions": {
                        "setupSteps": ["Install the desktop app.", "Import the recorded tracks."],
                        "usageSteps": [
                            "Remove filler words automatically.",
                            "Cut sections in the transcript.",
                            "Export the final mix.",
                        ],
                    },
                },
            ],
        }
    ],
}


class FakeUpstream:
    """Stands in for the Gemini HTTP call; returns canned model text."""

    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text if text is not None else json.dumps(PODCAST_PLAN)
        self.error = error
        self.calls: list[dict] = []

    async def __call__(self, prompt: str, schema: dict, transport=None) -> str:
        self.calls.append({"prompt": prompt, "schema": schema})
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a test client for synchronous tests."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def podcast_plan() -> dict:
    return json.loads(json.dumps(PODCAST_PLAN))


@pytest.fixture
def configured(monkeypatch) -> None:
    """Gemini provider with a credential present."""
    monkeypatch.setattr(settings, "LLM_PROVIDER", "gemini")
    monkeypatch.setattr(settings, "API_KEY", "test-key")


@pytest.fixture
def unconfigured(monkeypatch) -> None:
    monkeypatch.setattr(settings, "LLM_PROVIDER", "gemini")
    monkeypatch.setattr(settings, "API_KEY", "")


@pytest.fixture
def upstream(monkeypatch) -> FakeUpstream:
    fake = FakeUpstream()
    monkeypatch.setattr(llm_router, "_gemini_generate", fake)
    return fake
