"""BindableNode — a tree node carrying a binding context."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Iterable
from typing import Any

from .binding import Binding
from .events import PropertyChanged
from .paths import IDENTITY_PATH
from .properties import BindableProperty

logger = logging.getLogger(__name__)

CONTEXT_PROPERTY = "context"


class BindableNode:
    """A node whose bindings follow its own or an inherited context.

    The effective context is the inherited one when an ancestor supplied it,
    otherwise the locally assigned one. Children are never discovered here; a
    tree owner delivers ``set_inherited_context`` to them.
    """

    enabled = BindableProperty(default=True)
    tag = BindableProperty(default="")

    def __init__(
        self,
        name: str = "",
        *,
        bindings: Iterable[Binding] = (),
        target: Any = None,
    ) -> None:
        self.name = name
        self.bindings: list[Binding] = list(bindings)
        self.target = target
        self.property_changed = PropertyChanged()
        self.force_context_changed = False
        self._parent: weakref.ref[BindableNode] | None = None
        self._context: Any = None
        self._inherited_context: Any = None
        self._bindings_index: dict[str, Binding] | None = None

    @property
    def parent(self) -> BindableNode | None:
        if self._parent is None:
            return None
        return self._parent()

    def set_parent(self, parent: BindableNode | None) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def context(self) -> Any:
        """The locally assigned context."""
        return self._context

    @context.setter
    def context(self, value: Any) -> None:
        if self._context == value and not self.force_context_changed:
            return
        self.force_context_changed = False
        self._inherited_context = None
        self.on_binding_context_changing()
        self.set_property("_context", value, CONTEXT_PROPERTY)
        self.on_binding_context_changed()

    @property
    def inherited_context(self) -> Any:
        return self._inherited_context

    @inherited_context.setter
    def inherited_context(self, value: Any) -> None:
        if self.set_property("_inherited_context", value, "inherited_context"):
            self.on_inherited_context_changed()

    @property
    def effective_context(self) -> Any:
        """The context bindings are evaluated against."""
        if self._inherited_context is not None:
            return self._inherited_context
        return self._context

    def get_target[T](self, cls: type[T]) -> T:
        """Return the target, checked against the expected type."""
        if not isinstance(self.target, cls):
            raise TypeError(f"target of '{self.name}' is not a {cls.__name__}")
        return self.target

    def get_binding(self, property_name: str) -> Binding | None:
        """Return the last declared binding for a property, if any."""
        if self._bindings_index is None:
            self._bindings_index = {}
            for item in self.bindings:
                self._bindings_index[item.property_name] = item
        return self._bindings_index.get(property_name)

    def set_inherited_context(self, value: Any, force: bool = False) -> None:
        """Receive the effective context of an ancestor."""
        if self._inherited_context == value and not force:
            return
        logger.debug("Node '%s' inherits a new context", self.name)
        self._inherited_context = value
        self.on_binding_context_changing()
        context_binding = self.get_binding(CONTEXT_PROPERTY)
        if context_binding is not None and context_binding.path != IDENTITY_PATH:
            # the derived context is assigned through the binding itself
            context_binding.unapply()
            context_binding.target = self
            context_binding.context = self.effective_context
            context_binding.apply(True)
        else:
            self.on_binding_context_changed()

    def on_inherited_context_changed(self) -> None:
        pass

    def on_binding_context_changing(self) -> None:
        pass

    def on_binding_context_changed(self) -> None:
        """Re-apply every ordinary binding against the effective context."""
        context = self.effective_context
        logger.debug("Applying %d binding(s) on '%s'", len(self.bindings), self.name)
        for item in self.bindings:
            if item.property_name != CONTEXT_PROPERTY:
                item.target = self
                item.context = context
                item.apply()

    def on_property_changed(self, property_name: str) -> None:
        self.property_changed(self, property_name)

    def notify_property_changed_and_apply_binding(self, property_name: str) -> None:
        """Push a two-way property back into the context, then announce it."""
        item = self.get_binding(property_name)
        if item is not None and item.mode == "twoway":
            item.apply(False)
        self.property_changed(self, property_name)

    def set_property(self, storage: str, value: Any, property_name: str) -> bool:
        """Assign an attribute and announce the change; False when unchanged."""
        if getattr(self, storage) == value:
            return False
        setattr(self, storage, value)
        self.on_property_changed(property_name)
        return True

    def dispose(self) -> None:
        """Dispose all bindings and drop every reference held by this node."""
        logger.debug("Disposing node '%s'", self.name)
        for item in self.bindings:
            item.dispose()
        self.bindings.clear()
        self._bindings_index = None
        self.property_changed.clear()
        self.target = None
        self._context = None
        self._inherited_context = None
        self._parent = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, bindings={len(self.bindings)})"
