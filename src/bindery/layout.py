"""Layout — a typed collection of node trees declared in parsed data."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from . import bindings  # noqa: F401  registers the built-in kinds
from .binding import Binding, _binding_registry
from .container import BindableContainer
from .node import BindableNode
from .properties import bindable_properties

logger = logging.getLogger(__name__)

_STRUCTURAL_KEYS = {"binding", "node"}


def _decode_binding(property_name: str, attrs: dict[str, Any]) -> Binding:
    """Decode a binding block into a Binding instance using the registry.

    HCL2 structure for binding blocks:
        {"binding": [{"title": {"path": "name", "mode": "oneway"}}, ...]}
    """
    attrs = dict(attrs)
    kind = attrs.pop("kind", "path")
    if kind not in _binding_registry:
        raise ValueError(f"Unknown binding kind: '{kind}'")
    binding_cls = _binding_registry[kind]
    logger.debug("Decoding binding '%s' -> %s", property_name, binding_cls.__name__)
    return binding_cls(property_name=property_name, **attrs)


class Layout[N: BindableNode](Mapping[str, N]):
    """Node trees built from ``node`` blocks, keyed by dotted node path."""

    def __init__(
        self,
        node_type: type[N] = BindableContainer,  # type: ignore[assignment]
        *,
        context: dict[str, Any] | None = None,
    ) -> None:
        self._node_type = node_type
        self._context = context
        self._roots: list[N] = []
        self._nodes: dict[str, N] = {}

    @property
    def roots(self) -> list[N]:
        """Return the root nodes in load order."""
        return list(self._roots)

    def load(self, data: dict[str, Any]) -> None:
        """Build the node trees found in a parsed data dict.

        Raises ValueError if a node path is already loaded.
        """
        for node_block in data.get("node", []):
            for name, node_data in node_block.items():
                self._roots.append(self._build(name, node_data, name))

    def scan(self, path: str | Path, *, recurse: bool = True) -> None:
        """Load every .hcl file below a directory, in sorted order."""
        from .hcl import load

        root = Path(path)
        pattern = "**/*.hcl" if recurse else "*.hcl"
        for file in sorted(root.glob(pattern)):
            logger.debug("Loading layout file '%s'", file)
            self.load(load(file, context=self._context))

    def _build(self, name: str, data: dict[str, Any], path: str) -> N:
        if path in self._nodes:
            raise ValueError(f"Duplicate node: '{path}'")
        logger.debug("Building node '%s' as %s", path, self._node_type.__name__)

        declared = [
            _decode_binding(prop_name, attrs)
            for binding_block in data.get("binding", [])
            for prop_name, attrs in binding_block.items()
        ]
        node = self._node_type(name, bindings=declared)

        properties = bindable_properties(self._node_type)
        for key, value in data.items():
            if key in _STRUCTURAL_KEYS:
                continue
            if key not in properties:
                raise ValueError(f"Node '{path}' has no bindable property '{key}'")
            setattr(node, key, value)

        self._nodes[path] = node

        child_blocks = data.get("node", [])
        if child_blocks and not isinstance(node, BindableContainer):
            raise ValueError(f"Node '{path}' cannot hold child nodes")
        for child_block in child_blocks:
            for child_name, child_data in child_block.items():
                child = self._build(child_name, child_data, f"{path}.{child_name}")
                node.add_child(child)  # type: ignore[attr-defined]

        return node

    def bind(self, context: Any) -> None:
        """Assign a context to every root node."""
        logger.info("Binding %d root node(s)", len(self._roots))
        for root in self._roots:
            root.context = context

    def dispose(self) -> None:
        """Dispose every tree and forget all nodes."""
        for root in self._roots:
            root.dispose()
        self._roots.clear()
        self._nodes.clear()

    def __getitem__(self, path: str) -> N:
        return self._nodes[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        type_name = self._node_type.__name__
        return f"Layout(node_type={type_name}, roots={len(self._roots)}, nodes={len(self._nodes)})"
