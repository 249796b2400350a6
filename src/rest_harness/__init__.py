"""rest_harness package root exports with lazy imports to keep httpx off the import path."""

from __future__ import annotations

from typing import Any

__all__ = ["ApiClientFactory", "RequestContext", "Settings", "get_settings"]


def __getattr__(name: str) -> Any:
    if name == "ApiClientFactory":
        from rest_harness.clients.factory import ApiClientFactory

        return ApiClientFactory
    if name == "RequestContext":
        from rest_harness.context import RequestContext

        return RequestContext
    if name == "Settings":
        from rest_harness.settings import Settings

        return Settings
    if name == "get_settings":
        from rest_harness.settings import get_settings

        return get_settings
    raise AttributeError(f"module 'rest_harness' has no attribute '{name}'")
