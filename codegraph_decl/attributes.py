"""
Attribute Renderer

Renders annotation descriptors as bracketed lines, e.g.
    [Obsolete("deprecated", DiagnosticId = "X001")]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from codegraph_decl.config import RenderConfig
from codegraph_decl.literals import LiteralFormatter
from codegraph_decl.logging import get_logger
from codegraph_decl.models import ArgumentValue, AttributeDescriptor

logger = get_logger(__name__)


class AttributeRenderer:
    """Converts attribute descriptors to text lines, one per rendered attribute."""

    def __init__(self, config: RenderConfig | None = None, formatter: LiteralFormatter | None = None):
        self._config = config or RenderConfig()
        self._formatter = formatter or LiteralFormatter(self._config)

    def render(self, attributes: Iterable[AttributeDescriptor]) -> list[str]:
        lines = []
        for attribute in attributes:
            if self._config.is_ignored(attribute.type_name):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("attribute_skipped", attribute=attribute.type_name)
                continue
            lines.append(self.render_one(attribute))
        return lines

    def render_one(self, attribute: AttributeDescriptor) -> str:
        """Render a single attribute without consulting the ignore list."""
        positional = ", ".join(self._formatter.format(arg) for arg in attribute.positional)
        named = ", ".join(self._render_named(name, arg) for name, arg in attribute.named)

        if positional and named:
            combined = f"{positional}, {named}"
        else:
            combined = positional or named
        return f"[{attribute.type_name}({combined})]"

    def _render_named(self, name: str, value: ArgumentValue) -> str:
        text = self._formatter.format(value)
        if text == "":
            return name
        return f"{name} = {text}"
