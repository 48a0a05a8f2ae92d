"""BindableProperty descriptor for declaring node properties."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .node import BindableNode


class BindableProperty[T]:
    """Descriptor storing a value on a node and announcing changes.

    One-way properties go through ``BindableNode.set_property``. Two-way
    properties also push their new value into the bound context via
    ``BindableNode.notify_property_changed_and_apply_binding``.

    Example:
        class Label(BindableNode):
            text = BindableProperty(default="", two_way=True)
    """

    def __init__(
        self,
        default: T | None = None,
        *,
        two_way: bool = False,
        default_factory: Callable[[], T] | None = None,
        coerce: Callable[[Any], T] | None = None,
    ) -> None:
        if default is not None and default_factory is not None:
            raise ValueError("cannot set both default and default_factory")
        self.default = default
        self.default_factory = default_factory
        self.two_way = two_way
        self.coerce = coerce
        self.name = ""
        self.storage = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self.storage = f"_{name}"

    def __get__(self, obj: BindableNode | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return self._stored(obj)

    def _stored(self, obj: BindableNode) -> Any:
        if self.storage not in obj.__dict__:
            if self.default_factory is None:
                return self.default
            # each node gets its own instance
            obj.__dict__[self.storage] = self.default_factory()
        return obj.__dict__[self.storage]

    def __set__(self, obj: BindableNode, value: Any) -> None:
        if self.coerce is not None:
            value = self.coerce(value)
        obj.__dict__.setdefault(self.storage, self._stored(obj))
        if not self.two_way:
            obj.set_property(self.storage, value, self.name)
        elif obj.__dict__[self.storage] != value:
            obj.__dict__[self.storage] = value
            obj.notify_property_changed_and_apply_binding(self.name)


def bindable_properties(cls: type) -> dict[str, BindableProperty]:
    """Return the BindableProperty descriptors declared on cls and its bases."""
    found: dict[str, BindableProperty] = {}
    for klass in reversed(cls.__mro__):
        for name, value in vars(klass).items():
            if isinstance(value, BindableProperty):
                found[name] = value
    return found
