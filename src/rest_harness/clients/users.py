"""Client for the user resource endpoints."""

from __future__ import annotations

from typing import Dict, Union

import httpx

from rest_harness.clients.base import BaseApiClient

UserId = Union[int, str]


class UserClient:
    """Fetch, create, update, delete and list users under ``/api/users``."""

    resource = "/api/users"

    def __init__(self, api: BaseApiClient) -> None:
        self._api = api

    async def get_user(self, user_id: UserId) -> httpx.Response:
        """GET /api/users/{user_id}"""

        return await self._api.get(f"{self.resource}/{user_id}")

    async def create_user(self, name: str, job: str) -> httpx.Response:
        """POST /api/users"""

        return await self._api.post(self.resource, _user_payload(name, job))

    async def update_user(self, user_id: UserId, name: str, job: str) -> httpx.Response:
        """PUT /api/users/{user_id}"""

        return await self._api.put(f"{self.resource}/{user_id}", _user_payload(name, job))

    async def delete_user(self, user_id: UserId) -> httpx.Response:
        """DELETE /api/users/{user_id}"""

        return await self._api.delete(f"{self.resource}/{user_id}")

    async def list_users(self, page: int) -> httpx.Response:
        """GET /api/users?page={page}"""

        return await self._api.get(f"{self.resource}?page={page}")


def _user_payload(name: str, job: str) -> Dict[str, str]:
    return {"name": name, "job": job}
