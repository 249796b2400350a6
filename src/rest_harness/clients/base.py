"""Shared infrastructure for API clients."""

from __future__ import annotations

from typing import Any, Optional

import httpx
import orjson

from rest_harness.log import ClientLogger, LoguruClientLogger

MAX_ERROR_BODY_CHARS = 2000


class APIClientError(Exception):
    """Raised when a client-level error occurs."""


class UnknownKindError(APIClientError, LookupError):
    """Raised when the factory is asked for a client kind it does not know."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f'API client "{kind}" not found in ApiClientFactory.')
        self.kind = kind


def is_ok(response: httpx.Response) -> bool:
    return 200 <= response.status_code < 400


def serialize_payload(payload: Any) -> str:
    try:
        return orjson.dumps(payload, default=str, option=orjson.OPT_NON_STR_KEYS).decode()
    except (orjson.JSONEncodeError, TypeError):
        return repr(payload)


class BaseApiClient:
    """Issues GET/POST/PUT/DELETE calls through a borrowed transport handle.

    Every call logs its intent before hitting the transport and its outcome once
    the transport resolves. Responses are returned untouched, whatever their
    status; transport errors propagate to the caller.
    """

    def __init__(self, handle: httpx.AsyncClient, log: Optional[ClientLogger] = None, *, name: str = "api") -> None:
        self._handle = handle
        self._log = log or LoguruClientLogger(name)

    async def get(self, endpoint: str) -> httpx.Response:
        self._log.info(f"Sending GET request to: {endpoint}")
        response = await self._handle.get(endpoint)
        await self._log_response_status(response, "GET", endpoint)
        return response

    async def post(self, endpoint: str, data: Any = None) -> httpx.Response:
        self._log.info(f"Sending POST request to: {endpoint} with data: {serialize_payload(data)}")
        response = await self._handle.post(endpoint, json=data)
        await self._log_response_status(response, "POST", endpoint)
        return response

    async def put(self, endpoint: str, data: Any = None) -> httpx.Response:
        self._log.info(f"Sending PUT request to: {endpoint} with data: {serialize_payload(data)}")
        response = await self._handle.put(endpoint, json=data)
        await self._log_response_status(response, "PUT", endpoint)
        return response

    async def delete(self, endpoint: str) -> httpx.Response:
        self._log.info(f"Sending DELETE request to: {endpoint}")
        response = await self._handle.delete(endpoint)
        await self._log_response_status(response, "DELETE", endpoint)
        return response

    async def _log_response_status(self, response: httpx.Response, method: str, endpoint: str) -> None:
        if is_ok(response):
            self._log.info(f"Response ({method} {endpoint}): {response.status_code} {response.reason_phrase}")
            return
        self._log.error(
            f"Response ERROR ({method} {endpoint}): {response.status_code} {response.reason_phrase}"
            f" - URL: {response.url}"
        )
        await self._log_error_body(response)

    async def _log_error_body(self, response: httpx.Response) -> None:
        """Best-effort capture of an error body; never raises."""

        try:
            await response.aread()
            self._log.error(f"Error Body: {response.text[:MAX_ERROR_BODY_CHARS]}")
        except Exception as exc:  # noqa: BLE001
            self._log.debug(f"Error body unavailable: {exc!r}")
