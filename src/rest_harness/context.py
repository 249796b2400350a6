"""Shared transport handle with an explicit acquire/dispose lifecycle."""

from __future__ import annotations

import asyncio
import inspect
from enum import Enum
from functools import lru_cache
from typing import Any, Awaitable, Callable, Optional, Union

import httpx
from loguru import logger

from rest_harness.settings import Settings, get_settings

HandleFactory = Callable[[Settings], Union[httpx.AsyncClient, Awaitable[httpx.AsyncClient]]]


class ContextState(str, Enum):
    ABSENT = "absent"
    ACTIVE = "active"


def build_async_client(settings: Settings) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` bound to the configured service."""

    return httpx.AsyncClient(
        base_url=settings.base_url,
        headers=dict(settings.default_headers),
        timeout=httpx.Timeout(settings.timeout_seconds),
    )


class RequestContext:
    """Owns the single transport handle shared by every client in a test session.

    The handle is built lazily on the first ``acquire``. Concurrent first callers
    all await one construction task, so exactly one handle is ever built per
    lifecycle. ``dispose`` closes the handle and returns the context to the absent
    state; acquiring again afterwards builds a fresh handle.
    """

    def __init__(self, settings: Optional[Settings] = None, *, factory: Optional[HandleFactory] = None) -> None:
        self.settings = settings or get_settings()
        self._factory: HandleFactory = factory or build_async_client
        self._handle: Optional[httpx.AsyncClient] = None
        self._pending: Optional[asyncio.Task] = None

    @property
    def state(self) -> ContextState:
        return ContextState.ACTIVE if self._handle is not None else ContextState.ABSENT

    async def acquire(self) -> httpx.AsyncClient:
        """Return the shared handle, constructing it on first use."""

        if self._handle is not None:
            return self._handle
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._construct())
        return await asyncio.shield(self._pending)

    async def _construct(self) -> httpx.AsyncClient:
        try:
            handle = self._factory(self.settings)
            if inspect.isawaitable(handle):
                handle = await handle
        except BaseException:
            self._pending = None
            raise
        self._handle = handle
        self._pending = None
        logger.bind(base_url=self.settings.base_url).debug("Request context created")
        return handle

    async def dispose(self) -> None:
        """Release the handle's resources and reset to absent; no-op when absent."""

        handle, self._handle = self._handle, None
        if handle is None:
            return
        await handle.aclose()
        logger.bind(base_url=self.settings.base_url).debug("Request context disposed")

    async def __aenter__(self) -> httpx.AsyncClient:
        return await self.acquire()

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.dispose()


@lru_cache(maxsize=1)
def get_request_context() -> RequestContext:
    """Return the cached process-wide RequestContext built from environment settings."""

    return RequestContext(get_settings())
