"""A small multicast signal used to notify listeners of state changes."""

from __future__ import annotations

from typing import Any, Callable

Handler = Callable[..., Any]


class Signal:
    """Calls every connected handler, in connection order, on emit."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def connect(self, handler: Handler) -> None:
        """Register a handler; connecting the same handler twice is a no-op."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def disconnect(self, handler: Handler) -> None:
        """Remove a handler; raises ValueError if it was never connected."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError(f"handler {handler!r} is not connected") from None

    def emit(self, *args: Any) -> None:
        """Call every handler with the given arguments."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers