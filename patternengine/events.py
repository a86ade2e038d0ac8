"""A multicast delegate whose listeners are removed by id."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class _Listener:
    id: int
    func: Callable[..., Any]


class EventDelegate:
    """Calls every registered listener, in registration order, on invoke."""

    def __init__(self) -> None:
        self._listeners: list[_Listener] = []
        self._next_id = 0

    def add(self, func: Callable[..., Any]) -> int:
        """Register a listener and return its unique id."""
        listener_id = self._next_id
        self._next_id += 1
        self._listeners.append(_Listener(listener_id, func))
        return listener_id

    def set(self, func: Callable[..., Any]) -> int:
        """Replace all listeners with this one and return its id."""
        self._listeners.clear()
        return self.add(func)

    def remove_by_id(self, target_id: int) -> None:
        """Remove the listener with this id, if present."""
        self._listeners = [l for l in self._listeners if l.id != target_id]

    def clear(self) -> None:
        """Remove every listener."""
        self._listeners.clear()

    def invoke(self, *args: Any) -> None:
        """Call every listener with the given arguments."""
        for listener in list(self._listeners):
            listener.func(*args)

    __call__ = invoke

    def __len__(self) -> int:
        return len(self._listeners)