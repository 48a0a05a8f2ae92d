"""HCL loading engine — parse .hcl files into node layouts."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .layout import Layout

import hcl2
import jinja2

from .container import BindableContainer
from .node import BindableNode

logger = logging.getLogger(__name__)


def scan[N: BindableNode](
    path: str | Path,
    *,
    node_type: type[N] = BindableContainer,  # type: ignore[assignment]
    recurse: bool = True,
    context: dict[str, Any] | None = None,
) -> Layout[N]:
    """Scan a directory for .hcl files and return a ready Layout."""
    from .layout import Layout

    layout = Layout(node_type=node_type, context=context)
    layout.scan(path, recurse=recurse)
    return layout


def load(
    file: Path,
    *,
    context: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Load and parse a single HCL file, rendering Jinja2 templates with context."""
    text = file.read_text()
    ctx = context if context is not None else {}
    env = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )
    try:
        template = env.from_string(text)
        text = template.render(ctx)
    except jinja2.TemplateError as exc:
        raise ValueError(f"{file}: {exc}") from exc
    logger.debug("Parsing '%s'", file)
    return hcl2.loads(text)
