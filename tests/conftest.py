"""Shared pytest fixtures for the content SDK test suite."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest
import structlog

from content_sdk.config.settings import Settings
from content_sdk.models.entities import Event
from content_sdk.models.session import Session, SessionToken
from tests.payloads import event_payload

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def log_output() -> Any:
    """Capture structlog events instead of printing them."""
    with structlog.testing.capture_logs() as entries:
        yield entries


# ---------------------------------------------------------------------------
# Configuration and session fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake content host."""
    return Settings(
        content_service_scheme="https",
        content_service_host="content.test",
        origin="https://app.test",
    )


@pytest.fixture
def session() -> Session:
    return Session(xsrf_token="xsrf-123")


@pytest.fixture
def session_token() -> SessionToken:
    return SessionToken(session_id="0b6a4a6e-6b0d-4a26-9b7f-3a5e0d5c1e11", user_token="user-abc")


# ---------------------------------------------------------------------------
# Entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def event_data() -> dict[str, Any]:
    """Wire payload of an event that looks active."""
    return event_payload()


@pytest.fixture
def event(event_data: dict[str, Any]) -> Event:
    return Event.model_validate(event_data)


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_transport() -> Callable[[Handler], RecordingTransport]:
    """Factory for recording mock transports."""
    return RecordingTransport


def json_response(status_code: int, payload: Any) -> httpx.Response:
    """Shorthand for a JSON response from the fake service."""
    return httpx.Response(status_code, json=payload)
