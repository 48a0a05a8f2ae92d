"""Binding ABC and binding kind registration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Literal

from pydantic import BaseModel, Field

BindingMode = Literal["oneway", "twoway", "onetime"]

_binding_registry: dict[str, type[Binding]] = {}


def binding(kind: str):
    """Register a Binding class as a layout binding decoder."""

    def decorator(cls):
        _binding_registry[kind] = cls
        return cls

    return decorator


class Binding(BaseModel, ABC):
    """Connects one property of a target to a path inside a context."""

    model_config = {"arbitrary_types_allowed": True}

    property_name: str
    path: str = "."
    mode: BindingMode = "oneway"
    target: Any = Field(default=None, repr=False, exclude=True)
    context: Any = Field(default=None, repr=False, exclude=True)

    @abstractmethod
    def apply(self, to_target: bool = True) -> None:
        """Pull the context value into the target, or push it back when to_target is False."""

    @abstractmethod
    def unapply(self) -> None:
        """Release anything held on the current context."""

    def dispose(self) -> None:
        """Unapply and drop the target and context references."""
        self.unapply()
        self.target = None
        self.context = None
