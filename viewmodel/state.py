from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")


class StateField(Generic[T]):
    """
    Observable value. Subscribers are called with the new value on change only.

    The owning view-model is the single writer; views read `.value` or subscribe.
    """

    def __init__(self, initial: T):
        self._value = initial
        self.subscribers: List[Callable[[T], Any]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        for handler in list(self.subscribers):
            handler(new_value)

    def subscribe(self, handler: Callable[[T], Any]) -> Callable[[], None]:
        self.subscribers.append(handler)

        def unsubscribe() -> None:
            if handler in self.subscribers:
                self.subscribers.remove(handler)

        return unsubscribe

    def __repr__(self) -> str:
        return f"StateField({self._value!r})"
