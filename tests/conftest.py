"""Pytest configuration and shared fixtures."""

from collections.abc import Callable

import httpx
import pytest

from reactpodcast.config import SimplecastSettings

PODCAST_ID = "bdb43d4d-bd1d-4fbc-bd60-40f1e3299aa3"
EPISODES_URL = f"https://api.simplecast.com/podcasts/{PODCAST_ID}/episodes"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host Simplecast variables out of the tests."""
    for name in ("SIMPLECAST_TOKEN", "VITE_SIMPLECAST_TOKEN", "SIMPLECAST_PODCAST_ID"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> SimplecastSettings:
    """Settings with a known token and no backoff between attempts."""
    return SimplecastSettings(token="test-token", retry_backoff_seconds=0)


@pytest.fixture
def sample_listing() -> dict:
    """Sample Simplecast episode listing."""
    return {
        "href": EPISODES_URL,
        "count": 3,
        "pages": {"total": 1, "limit": 1000, "current": 1},
        "collection": [
            {
                "id": "ep-003",
                "title": "Hooks All The Way Down",
                "status": "published",
                "number": 3,
                "season": {"href": "https://api.simplecast.com/seasons/s1", "number": 1},
                "published_at": "2021-03-01T09:00:00.000-08:00",
                "description": "Custom hooks and composition.",
                "enclosure_url": "https://cdn.simplecast.com/audio/ep-003.mp3",
            },
            {
                "id": "ep-002",
                "title": "Compound Components",
                "status": "published",
                "number": 2,
                "season": {"href": "https://api.simplecast.com/seasons/s1", "number": 1},
                "published_at": "2021-02-01T09:00:00.000-08:00",
                "description": "",
            },
            {
                "id": "ep-004",
                "title": "Render Props Revisited",
                "status": "draft",
                "number": None,
                "season": None,
                "published_at": None,
            },
        ],
    }


class RecordingHandler:
    """MockTransport handler that records requests and replays responses."""

    def __init__(self, *responses: httpx.Response | Exception) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def make_handler() -> Callable[..., RecordingHandler]:
    return RecordingHandler
