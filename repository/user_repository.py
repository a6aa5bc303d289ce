from typing import List, Optional, Type, TypeVar
import logging

import httpx
from pydantic import BaseModel

from core.response import Result
from models.user import SingleUserResponse, User, UserResponse
from network.api_service import ContactsApiService

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _parse_body(response: httpx.Response, model: Type[M]) -> Optional[M]:
    """Decode the envelope, or None when the response has no body."""
    if not response.content:
        return None
    return model.model_validate(response.json())


def _status_failure(action: str, response: httpx.Response) -> Result:
    logger.warning("%s failed with HTTP %s", action, response.status_code)
    return Result.failure(f"Failed to {action}: {response.status_code}")


def _connection_failure(action: str, exc: Exception) -> Result:
    logger.warning("%s failed: %s", action, exc)
    return Result.failure(f"Connection error: {exc}")


class UserRepository:
    """
    Wraps ContactsApiService and maps every outcome into a Result.

    Non-2xx statuses become "Failed to <action>: <code>"; transport errors and
    undecodable bodies become "Connection error: <message>".
    """

    def __init__(self, api: Optional[ContactsApiService] = None):
        self.api = api or ContactsApiService()

    # INDEX
    async def get_users(self) -> Result[List[User]]:
        action = "load users"
        try:
            response = await self.api.get_users()
            body = _parse_body(response, UserResponse) if response.is_success else None
            if body is None:
                return _status_failure(action, response)
            return Result.success(body.data)
        except (httpx.HTTPError, ValueError) as e:
            return _connection_failure(action, e)

    # SHOW
    async def get_user(self, user_id: int) -> Result[User]:
        action = "load user"
        try:
            response = await self.api.get_user(user_id)
            body = _parse_body(response, SingleUserResponse) if response.is_success else None
            if body is None:
                return _status_failure(action, response)
            return Result.success(body.data)
        except (httpx.HTTPError, ValueError) as e:
            return _connection_failure(action, e)

    # STORE
    async def create_user(self, user: User) -> Result[User]:
        action = "create user"
        try:
            response = await self.api.create_user(user)
            body = _parse_body(response, SingleUserResponse) if response.is_success else None
            if body is None:
                return _status_failure(action, response)
            return Result.success(body.data)
        except (httpx.HTTPError, ValueError) as e:
            return _connection_failure(action, e)

    # UPDATE
    async def update_user(self, user_id: int, user: User) -> Result[User]:
        action = "update user"
        try:
            response = await self.api.update_user(user_id, user)
            body = _parse_body(response, SingleUserResponse) if response.is_success else None
            if body is None:
                return _status_failure(action, response)
            return Result.success(body.data)
        except (httpx.HTTPError, ValueError) as e:
            return _connection_failure(action, e)

    # DESTROY
    async def delete_user(self, user_id: int) -> Result[bool]:
        action = "delete user"
        try:
            response = await self.api.delete_user(user_id)
            if not response.is_success:
                return _status_failure(action, response)
            return Result.success(True)
        except httpx.HTTPError as e:
            return _connection_failure(action, e)
