from pydantic import BaseModel, Field
from typing import Dict, Optional

from models.user import User


class UserPayload(BaseModel):
    """Request body accepted by the dev contacts server for create/update."""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    image_url: Optional[str] = None


class UserForm(BaseModel):
    """Raw text of the create/edit form fields."""
    name: str = ""
    email: str = ""
    phone: str = ""
    image_url: str = ""

    @classmethod
    def from_user(cls, user: User) -> "UserForm":
        return cls(
            name=user.name,
            email=user.email,
            phone=user.phone,
            image_url=user.image_url or "",
        )

    def to_user(self) -> User:
        image_url = self.image_url.strip()
        return User(
            name=self.name.strip(),
            email=self.email.strip(),
            phone=self.phone.strip(),
            image_url=image_url or None,
        )


class FormValidation(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.name is None and self.email is None and self.phone is None

    def errors(self) -> Dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v is not None}
