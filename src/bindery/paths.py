"""Dotted path walking over mappings and attributes."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

IDENTITY_PATH = "."


def split_path(path: str) -> list[str]:
    """Split a dotted path into segments; the identity path has none."""
    if path == IDENTITY_PATH:
        return []
    parts = path.split(".")
    if not all(parts):
        raise ValueError(f"invalid path '{path}'")
    return parts


def lookup(obj: Any, name: str) -> Any:
    """Return a mapping item or attribute of obj."""
    if isinstance(obj, Mapping):
        try:
            return obj[name]
        except KeyError:
            pass
    try:
        return getattr(obj, name)
    except AttributeError:
        raise ValueError(f"cannot resolve '{name}' on {type(obj).__name__}") from None


def resolve_path(obj: Any, segments: list[str]) -> Any:
    current = obj
    for part in segments:
        current = lookup(current, part)
    return current


def assign(obj: Any, name: str, value: Any) -> None:
    """Store value as a mapping item or attribute of obj."""
    if isinstance(obj, MutableMapping):
        obj[name] = value
    else:
        setattr(obj, name, value)
