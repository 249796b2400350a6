"""Factory producing endpoint-specific API clients."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Union

import httpx

from rest_harness.clients.base import BaseApiClient, UnknownKindError
from rest_harness.clients.register import RegistrationClient
from rest_harness.clients.users import UserClient
from rest_harness.log import ClientLogger

if TYPE_CHECKING:
    from rest_harness.context import RequestContext

DomainClient = Union[UserClient, RegistrationClient]


class ClientKind(str, Enum):
    USERS = "users"
    REGISTER = "register"


class ApiClientFactory:
    """Builds a fresh domain client around a shared transport handle.

    The typed constructors are the primary entry points. ``create`` resolves a
    kind by name for table-driven callers and raises ``UnknownKindError`` for
    anything unregistered.
    """

    @staticmethod
    def user_client(handle: httpx.AsyncClient, *, log: Optional[ClientLogger] = None) -> UserClient:
        return UserClient(BaseApiClient(handle, log, name=ClientKind.USERS.value))

    @staticmethod
    def registration_client(
        handle: httpx.AsyncClient, *, log: Optional[ClientLogger] = None
    ) -> RegistrationClient:
        return RegistrationClient(BaseApiClient(handle, log, name=ClientKind.REGISTER.value))

    @classmethod
    def kinds(cls) -> List[ClientKind]:
        return list(_CONSTRUCTORS)

    @classmethod
    def resolve(cls, kind: Union[ClientKind, str]) -> ClientKind:
        """Map a kind, its value, its name or its client class name to a ClientKind."""

        if isinstance(kind, ClientKind):
            return kind
        key = str(kind).strip().lower()
        for candidate in ClientKind:
            aliases = {candidate.value, candidate.name.lower(), _CLIENT_TYPES[candidate].__name__.lower()}
            if key in aliases:
                return candidate
        raise UnknownKindError(kind)

    @classmethod
    def create(
        cls,
        kind: Union[ClientKind, str],
        handle: httpx.AsyncClient,
        *,
        log: Optional[ClientLogger] = None,
    ) -> DomainClient:
        constructor = _CONSTRUCTORS[cls.resolve(kind)]
        return constructor(handle, log=log)

    @classmethod
    async def from_context(
        cls,
        context: "RequestContext",
        kind: Union[ClientKind, str],
        *,
        log: Optional[ClientLogger] = None,
    ) -> DomainClient:
        """Acquire the context's handle and build the requested client on it."""

        target = cls.resolve(kind)
        handle = await context.acquire()
        return cls.create(target, handle, log=log)


_CONSTRUCTORS: Dict[ClientKind, Callable[..., DomainClient]] = {
    ClientKind.USERS: ApiClientFactory.user_client,
    ClientKind.REGISTER: ApiClientFactory.registration_client,
}

_CLIENT_TYPES: Dict[ClientKind, type] = {
    ClientKind.USERS: UserClient,
    ClientKind.REGISTER: RegistrationClient,
}
