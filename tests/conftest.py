"""Shared fixtures: isolated settings and a fake GitHub API."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from gister.config.base import GisterSettings

API_URL = 'https://api.github.test'
GIST_URL = 'https://gist.example/abc'


class RecordingLogger:
    """LoggerProtocol implementation that keeps every message."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.messages.append(('debug', message))

    def info(self, message: str) -> None:
        self.messages.append(('info', message))

    def warning(self, message: str) -> None:
        self.messages.append(('warning', message))

    def error(self, message: str) -> None:
        self.messages.append(('error', message))

    def at(self, level: str) -> list[str]:
        return [message for lvl, message in self.messages if lvl == level]


class FakeGistAPI:
    """Answers every request with a fixed response and records what it saw."""

    def __init__(self, status_code: int = 201, json: object = None, content: bytes | None = None) -> None:
        self.status_code = status_code
        self.json = {'id': 'abc', 'html_url': GIST_URL} if json is None and content is None else json
        self.content = content
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, 'no request was sent'
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep the developer's real token and .env out of the tests."""
    for name in ('GISTER_GITHUB_TOKEN', 'GISTER_API_URL', 'GISTER_TOKEN_FILE', 'LOAD_ENV_FILE'):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv('HOME', str(tmp_path / 'home'))


@pytest.fixture
def token_file(tmp_path: Path) -> Path:
    return tmp_path / '.gist'


@pytest.fixture
def make_settings(token_file: Path) -> Callable[..., GisterSettings]:
    def factory(token: str = '', **overrides: object) -> GisterSettings:
        values: dict[str, object] = {
            'GISTER_API_URL': API_URL,
            'GISTER_GITHUB_TOKEN': token,
            'GISTER_TOKEN_FILE': token_file,
        }
        values.update(overrides)
        return GisterSettings(**values)

    return factory


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def fake_api() -> FakeGistAPI:
    return FakeGistAPI()
