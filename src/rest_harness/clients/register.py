"""Client for the registration endpoint."""

from __future__ import annotations

import httpx

from rest_harness.clients.base import BaseApiClient


class RegistrationClient:
    """Registers users through ``POST /api/register``."""

    def __init__(self, api: BaseApiClient) -> None:
        self._api = api

    async def register_user(self, email: str, password: str) -> httpx.Response:
        return await self._api.post("/api/register", {"email": email, "password": password})
