"""Shared fixtures: an in-memory imitation of reqres.in and a recording logger."""

from __future__ import annotations

import json
from typing import Any, AsyncIterator, Dict, List, Tuple

import httpx
import pytest

from rest_harness.settings import Settings

BASE_URL = "https://reqres.in"

JANET = {
    "id": 2,
    "email": "janet.weaver@reqres.in",
    "first_name": "Janet",
    "last_name": "Weaver",
}


class FakeReqres:
    """Answers the user and registration endpoints the way reqres.in does."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        method = request.method
        if path == "/api/register" and method == "POST":
            return self._register(_json_body(request))
        if path == "/api/users" and method == "GET":
            page = int(request.url.params.get("page", "1"))
            return httpx.Response(200, json={"page": page, "per_page": 6, "data": [JANET]})
        if path == "/api/users" and method == "POST":
            body = _json_body(request)
            return httpx.Response(201, json={**body, "id": "512", "createdAt": "2026-10-16T09:00:00.000Z"})
        if path.startswith("/api/users/"):
            user_id = path.rsplit("/", 1)[-1]
            if method == "GET":
                if user_id == "2":
                    return httpx.Response(200, json={"data": JANET})
                return httpx.Response(404, json={})
            if method == "PUT":
                body = _json_body(request)
                return httpx.Response(200, json={**body, "updatedAt": "2026-10-16T09:00:00.000Z"})
            if method == "DELETE":
                return httpx.Response(204)
        return httpx.Response(404, json={})

    def _register(self, body: Dict[str, Any]) -> httpx.Response:
        if not body.get("password"):
            return httpx.Response(400, json={"error": "Missing password"})
        if body.get("email") != "eve.holt@reqres.in":
            return httpx.Response(400, json={"error": "Note: Only defined users succeed registration"})
        return httpx.Response(200, json={"id": 4, "token": "QpwL5tke4Pnpja7X4"})


class RecordingLogger:
    """ClientLogger that keeps (level, message) pairs in emission order."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def warning(self, message: str) -> None:
        self.records.append(("warning", message))

    def error(self, message: str) -> None:
        self.records.append(("error", message))

    def levels(self) -> List[str]:
        return [level for level, _ in self.records]


def _json_body(request: httpx.Request) -> Dict[str, Any]:
    return json.loads(request.content or b"{}")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        API_BASE_URL=BASE_URL,
        API_DEFAULT_HEADERS={"Content-Type": "application/json", "x-api-key": "test-key"},
        API_TIMEOUT_SECONDS=5.0,
    )


@pytest.fixture
def service() -> FakeReqres:
    return FakeReqres()


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
async def handle(service: FakeReqres) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(service.handle)) as client:
        yield client
