"""Built-in binding kinds."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import PrivateAttr

from .binding import Binding, binding
from .events import PropertyChanged
from .paths import assign, lookup, resolve_path, split_path

logger = logging.getLogger(__name__)


@binding("path")
class PathBinding(Binding):
    """Binds a target property to a dotted path of mapping keys and attributes.

    One-way and two-way bindings follow the object owning the last path
    segment when it exposes a ``property_changed`` event, so a change of that
    member is pulled into the target again. One-time bindings never follow.
    """

    _owner: Any = PrivateAttr(default=None)
    _updating: bool = PrivateAttr(default=False)

    def apply(self, to_target: bool = True) -> None:
        if to_target:
            self._update_target()
        else:
            self._update_source()

    def unapply(self) -> None:
        self._unwatch()

    def _split(self) -> tuple[list[str], str | None]:
        segments = split_path(self.path)
        if not segments:
            return [], None
        return segments[:-1], segments[-1]

    def _update_target(self) -> None:
        if self.target is None or self.context is None:
            self._unwatch()
            logger.debug("Skipping '%s'; nothing to bind", self.property_name)
            return
        parents, leaf = self._split()
        owner = resolve_path(self.context, parents)
        value = owner if leaf is None else lookup(owner, leaf)
        if self.mode != "onetime" and leaf is not None:
            self._watch(owner)
        logger.debug("Binding '%s' <- '%s'", self.property_name, self.path)
        self._updating = True
        try:
            setattr(self.target, self.property_name, value)
        finally:
            self._updating = False

    def _update_source(self) -> None:
        if self._updating or self.target is None or self.context is None:
            return
        parents, leaf = self._split()
        if leaf is None:
            raise ValueError(f"cannot write '{self.property_name}' back through path '{self.path}'")
        owner = resolve_path(self.context, parents)
        value = getattr(self.target, self.property_name)
        logger.debug("Binding '%s' -> '%s'", self.property_name, self.path)
        self._updating = True
        try:
            assign(owner, leaf, value)
        finally:
            self._updating = False

    def _watch(self, owner: Any) -> None:
        if owner is self._owner:
            return
        self._unwatch()
        event = getattr(owner, "property_changed", None)
        if isinstance(event, PropertyChanged):
            event.subscribe(self._on_source_changed)
            self._owner = owner

    def _unwatch(self) -> None:
        if self._owner is not None:
            self._owner.property_changed.unsubscribe(self._on_source_changed)
            self._owner = None

    def _on_source_changed(self, sender: Any, property_name: str) -> None:
        _, leaf = self._split()
        if property_name == leaf and not self._updating:
            self._update_target()
