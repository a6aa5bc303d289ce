"""
UserViewModel: observable state + orchestration for the contacts screens.

The view reads the StateFields (or subscribes to them) and triggers the async
actions below; only this class writes the fields. Failures from the repository
are published into `error`, confirmations into `success_message`, both cleared
by `clear_messages()`.
"""
import logging
from typing import Callable, List, Optional

from models.user import User
from repository.user_repository import UserRepository
from viewmodel.state import StateField

logger = logging.getLogger(__name__)


class UserViewModel:
    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository or UserRepository()

        self.users: StateField[List[User]] = StateField([])
        self.selected_user: StateField[Optional[User]] = StateField(None)
        self.is_loading: StateField[bool] = StateField(False)
        self.error: StateField[Optional[str]] = StateField(None)
        self.success_message: StateField[Optional[str]] = StateField(None)

    def _begin(self) -> None:
        self.is_loading.value = True
        self.error.value = None

    def _fail(self, message: str) -> None:
        self.error.value = message

    # INDEX
    async def load_users(self) -> None:
        self._begin()
        try:
            result = await self.repository.get_users()
            if result.is_success:
                self.users.value = result.value
                self.error.value = None
            else:
                self._fail(result.error)
        finally:
            self.is_loading.value = False

    # SHOW
    async def load_user(self, user_id: int) -> None:
        self._begin()
        try:
            result = await self.repository.get_user(user_id)
            if result.is_success:
                self.selected_user.value = result.value
                self.error.value = None
            else:
                self._fail(result.error)
        finally:
            self.is_loading.value = False

    # STORE
    async def create_user(self, user: User, on_success: Optional[Callable[[], None]] = None) -> None:
        self._begin()
        try:
            result = await self.repository.create_user(user)
            if result.is_success:
                logger.info("Created user id=%s", result.value.id)
                self.success_message.value = "User created successfully"
                await self.load_users()
                if on_success:
                    on_success()
            else:
                self._fail(result.error)
        finally:
            self.is_loading.value = False

    # UPDATE
    async def update_user(self, user_id: int, user: User, on_success: Optional[Callable[[], None]] = None) -> None:
        self._begin()
        try:
            result = await self.repository.update_user(user_id, user)
            if result.is_success:
                logger.info("Updated user id=%s", user_id)
                self.success_message.value = "User updated successfully"
                await self.load_users()
                await self.load_user(user_id)
                if on_success:
                    on_success()
            else:
                self._fail(result.error)
        finally:
            self.is_loading.value = False

    # DESTROY
    async def delete_user(self, user_id: int, on_success: Optional[Callable[[], None]] = None) -> None:
        self._begin()
        try:
            result = await self.repository.delete_user(user_id)
            if result.is_success:
                logger.info("Deleted user id=%s", user_id)
                self.success_message.value = "User deleted successfully"
                selected = self.selected_user.value
                if selected is not None and selected.id == user_id:
                    self.selected_user.value = None
                await self.load_users()
                if on_success:
                    on_success()
            else:
                self._fail(result.error)
        finally:
            self.is_loading.value = False

    def clear_messages(self) -> None:
        self.error.value = None
        self.success_message.value = None
