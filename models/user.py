# models/user.py
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

# Server-assigned fields, never sent by the client.
SERVER_FIELDS = {"id", "created_at", "updated_at"}


class User(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    name: str
    email: str
    phone: str
    image_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_payload(self) -> dict:
        """JSON body for create/update requests (no id, no timestamps)."""
        return self.model_dump(exclude=SERVER_FIELDS)


class UserResponse(BaseModel):
    data: List[User]


class SingleUserResponse(BaseModel):
    data: User
