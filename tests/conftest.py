"""
Shared pytest fixtures.

This module provides fixtures for:
- Sample Chromatic webhook payloads
- A recording outbound transport standing in for the Teams webhook
- A TestClient wired to both through dependency overrides
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from teamsrelay.channels.dispatcher import get_http_client
from teamsrelay.config import Settings, get_settings
from teamsrelay.main import app

TEAMS_URL = "https://example.webhook.office.com/webhookb2/test"


# =============================================================================
# Payload Fixtures
# =============================================================================


@pytest.fixture
def build_payload() -> dict:
    return {
        "version": 1,
        "event": "build",
        "build": {
            "number": 42,
            "branch": "main",
            "commit": "abc1234",
            "committerName": "octocat",
            "status": "PASSED",
            "result": "SUCCESS",
            "storybookUrl": "https://main--abc.chromatic.com",
            "webUrl": "https://www.chromatic.com/build?appId=abc&number=42",
            "changeCount": 3,
            "componentCount": 17,
            "specCount": 54,
            "project": {
                "name": "design-system",
                "accountName": "acme",
                "accountAvatarUrl": "https://avatars.example.com/acme.png",
                "webUrl": "https://www.chromatic.com/builds?appId=abc",
            },
        },
    }


@pytest.fixture
def review() -> dict:
    return {
        "number": 7,
        "title": "Update button styles",
        "status": "OPEN",
        "baseRefName": "main",
        "headRefName": "feature/buttons",
        "isCrossRepository": False,
        "webUrl": "https://www.chromatic.com/review?appId=abc&number=7",
        "author": {
            "name": "Octo Cat",
            "username": "octocat",
            "avatarUrl": "https://avatars.example.com/octocat.png",
        },
    }


@pytest.fixture
def review_payload(review) -> dict:
    return {"version": 1, "event": "review", "review": review}


@pytest.fixture
def decision_payload(review) -> dict:
    return {
        "version": 1,
        "event": "review-decision",
        "reviewDecision": {
            "status": "APPROVED",
            "project": {"name": "design-system", "accountName": "acme"},
            "review": review,
            "reviewer": {"name": "Mona", "username": "mona"},
        },
    }


# =============================================================================
# Outbound Transport
# =============================================================================


class RecordingTransport:
    """Records outbound requests; optionally fails them."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.error: Exception | None = None

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text="1")


@pytest.fixture
def teams_url() -> str:
    return TEAMS_URL


@pytest.fixture
def outbound() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(outbound):
    async def _http_client():
        async with httpx.AsyncClient(transport=httpx.MockTransport(outbound.handle)) as http:
            yield http

    app.dependency_overrides[get_http_client] = _http_client
    app.dependency_overrides[get_settings] = lambda: Settings(teams_webhook_url=TEAMS_URL)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
