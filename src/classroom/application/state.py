"""Reactive state cells.

A ``State`` holds one mutable value of a view.  Writing ``.value``
notifies every subscriber with the new value, which is the hook a
renderer uses to redraw.  Handlers always write a value back after
changing it, even when they mutated the held object in place.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class State(Generic[T]):

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Listener[T]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        for listener in list(self._listeners):
            listener(new_value)

    def subscribe(self, listener: Listener[T]) -> Callable[[], None]:
        """Call *listener* after every write.  Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __repr__(self) -> str:
        return f"State({self._value!r})"
