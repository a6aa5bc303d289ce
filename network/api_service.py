"""
HTTP client for the contacts REST API.

Endpoints (relative to settings.CONTACTS_API_BASE_URL):
    GET    users          list users
    GET    users/{id}     show one user
    POST   users          create user (body: user without id/timestamps)
    PUT    users/{id}     update user
    DELETE users/{id}     delete user

Methods return the raw httpx.Response; status handling lives in UserRepository.
Each call opens a short-lived AsyncClient from `client_factory`, so the service
is safe to use from successive event loops (e.g. one asyncio.run per UI action).
"""
from typing import Callable, Optional

import httpx

from config.settings import settings
from core.logging import http_event_hooks
from models.user import User


def build_timeout() -> httpx.Timeout:
    return httpx.Timeout(
        connect=settings.HTTP_CONNECT_TIMEOUT,
        read=settings.HTTP_READ_TIMEOUT,
        write=settings.HTTP_WRITE_TIMEOUT,
        pool=settings.HTTP_POOL_TIMEOUT,
    )


def build_client(
    base_url: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url or settings.CONTACTS_API_BASE_URL,
        timeout=build_timeout(),
        headers={"Accept": "application/json"},
        event_hooks=http_event_hooks(),
        transport=transport,
    )


class ContactsApiService:
    def __init__(self, client_factory: Callable[[], httpx.AsyncClient] = build_client):
        self._client_factory = client_factory

    async def _request(self, method: str, path: str, json: dict | None = None) -> httpx.Response:
        async with self._client_factory() as client:
            return await client.request(method, path, json=json)

    async def get_users(self) -> httpx.Response:
        return await self._request("GET", "users")

    async def get_user(self, user_id: int) -> httpx.Response:
        return await self._request("GET", f"users/{user_id}")

    async def create_user(self, user: User) -> httpx.Response:
        return await self._request("POST", "users", json=user.to_payload())

    async def update_user(self, user_id: int, user: User) -> httpx.Response:
        return await self._request("PUT", f"users/{user_id}", json=user.to_payload())

    async def delete_user(self, user_id: int) -> httpx.Response:
        return await self._request("DELETE", f"users/{user_id}")
