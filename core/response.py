from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
R = TypeVar("R")


def ok(data=None):
    """Standard success envelope."""
    return {"data": data}


def error(message: str = "An internal error occurred", errors=None):
    """Standard error envelope."""
    body = {"message": message}
    if errors is not None:
        body["errors"] = errors
    return body


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a repository call: either a value or a human-readable error.

    Exactly one of `value` / `error` is meaningful; `error is None` means success.
    """
    value: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, message: str) -> "Result[Any]":
        return cls(value=None, error=message or "Unknown error")

    @property
    def is_success(self) -> bool:
        return self.error is None

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[str], R]) -> R:
        if self.is_success:
            return on_success(self.value)
        return on_failure(self.error)
