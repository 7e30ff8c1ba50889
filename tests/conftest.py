"""
Shared fixtures for the Discord Command Logger tests.
"""

import json
from datetime import datetime

import pytest
import pytz

from discord_command_logger.config.models import Config
from discord_command_logger.observability.metrics import metrics


class FakeResponse:
    """Stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status: int, text: str = ""):
        self.status = status
        self._text = text

    async def text(self):
        return self._text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Stand-in for aiohttp.ClientSession; also acts as its own factory."""

    def __init__(self, status: int = 204, text: str = "", error: Exception = None):
        self.status = status
        self.text = text
        self.error = error
        self.session_kwargs = None
        self.posts = []

    def __call__(self, **kwargs):
        self.session_kwargs = kwargs
        return self

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False

    def post(self, url, **kwargs):
        self.posts.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status, self.text)


WEBHOOK_URL = "https://discord.com/api/webhooks/123/abc"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep real environment overrides and counters out of the tests."""
    monkeypatch.delenv("DISCORD_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def config():
    return Config(webhook_url=WEBHOOK_URL)


@pytest.fixture
def fixed_now():
    return pytz.timezone("Europe/Berlin").localize(datetime(2024, 5, 1, 12, 30, 45))


@pytest.fixture
def write_config(tmp_path):
    """Write a config.json into a temporary data dir and return the dir."""
    def _write(**values):
        data = Config().to_file_dict()
        data.update(values)
        (tmp_path / "config.json").write_text(json.dumps(data), encoding="utf-8")
        return tmp_path
    return _write
