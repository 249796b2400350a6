"""API clients for the REST service under test."""

from rest_harness.clients.base import APIClientError, BaseApiClient, UnknownKindError
from rest_harness.clients.factory import ApiClientFactory, ClientKind
from rest_harness.clients.register import RegistrationClient
from rest_harness.clients.users import UserClient

__all__ = [
    "APIClientError",
    "ApiClientFactory",
    "BaseApiClient",
    "ClientKind",
    "RegistrationClient",
    "UnknownKindError",
    "UserClient",
]
