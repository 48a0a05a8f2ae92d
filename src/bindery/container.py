"""BindableContainer — a node that passes its context down to children."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from .binding import Binding
from .node import BindableNode

logger = logging.getLogger(__name__)


class BindableContainer(BindableNode):
    """Owns an ordered list of child nodes and propagates context to them."""

    def __init__(
        self,
        name: str = "",
        *,
        bindings: Iterable[Binding] = (),
        target: Any = None,
        children: Iterable[BindableNode] = (),
    ) -> None:
        super().__init__(name, bindings=bindings, target=target)
        self._children: list[BindableNode] = []
        for child in children:
            self.add_child(child)

    @property
    def children(self) -> tuple[BindableNode, ...]:
        return tuple(self._children)

    def add_child(self, child: BindableNode) -> None:
        """Attach a child and hand it the current effective context."""
        if any(c is child for c in self._children):
            raise ValueError(f"'{child.name}' is already a child of '{self.name}'")
        owner = child.parent
        if owner is not None and owner is not self:
            raise ValueError(f"'{child.name}' already belongs to '{owner.name}'")
        child.set_parent(self)
        self._children.append(child)
        logger.debug("Added '%s' to '%s'", child.name, self.name)
        context = self.effective_context
        if context is not None:
            child.set_inherited_context(context)

    def remove_child(self, child: BindableNode) -> None:
        """Detach a child; it falls back to its own local context."""
        for index, c in enumerate(self._children):
            if c is child:
                del self._children[index]
                break
        else:
            raise ValueError(f"'{child.name}' is not a child of '{self.name}'")
        child.set_parent(None)
        logger.debug("Removed '%s' from '%s'", child.name, self.name)
        if child.inherited_context is not None:
            local = child.context
            child.force_context_changed = True
            child.context = local

    def on_binding_context_changed(self) -> None:
        super().on_binding_context_changed()
        context = self.effective_context
        for child in self._children:
            child.set_inherited_context(context)

    def dispose(self) -> None:
        for child in self._children:
            child.dispose()
        self._children.clear()
        super().dispose()
