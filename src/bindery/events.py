"""Synchronous property change event."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

type PropertyChangedHandler = Callable[[Any, str], None]


class PropertyChanged:
    """An ordered list of handlers called with ``(sender, property_name)``."""

    def __init__(self) -> None:
        self._handlers: list[PropertyChangedHandler] = []

    def subscribe(self, handler: PropertyChangedHandler) -> PropertyChangedHandler:
        """Register a handler; returns it so this can be used as a decorator."""
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: PropertyChangedHandler) -> bool:
        """Remove the first registration of a handler, if any."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        self._handlers.clear()

    def __call__(self, sender: Any, property_name: str) -> None:
        # handlers may unsubscribe while being notified
        for handler in list(self._handlers):
            handler(sender, property_name)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers

    def __repr__(self) -> str:
        return f"PropertyChanged(handlers={len(self._handlers)})"
