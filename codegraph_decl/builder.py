"""
Declaration Builder

Top-level entry point. Sequences attribute emission and header emission for a
callable and optionally strips host-generated name artifacts.

Example:
    builder = DeclarationBuilder()
    text = builder.build_header(descriptor)
    # [Obsolete("deprecated")]
    # public System.Int32 Add(System.Int32 a, System.Int32 b)
"""

from __future__ import annotations

import logging

from codegraph_decl.attributes import AttributeRenderer
from codegraph_decl.config import RenderConfig
from codegraph_decl.header import HeaderRenderer
from codegraph_decl.literals import LiteralFormatter
from codegraph_decl.logging import get_logger
from codegraph_decl.models import CallableDescriptor
from codegraph_decl.parameters import ParameterRenderer

logger = get_logger(__name__)


class DeclarationBuilder:
    """
    Renders a callable descriptor as declaration text.

    Responsibilities:
    - Attribute lines for the callable itself
    - Parameter rendering (modifiers, defaults, parameter attributes)
    - Header line composition
    - Optional normalization of mangled names
    """

    def __init__(self, config: RenderConfig | None = None):
        """
        Initialize builder.

        Args:
            config: Rendering configuration (ignore list, default visibility, ...)
        """
        self.config = config or RenderConfig()
        formatter = LiteralFormatter(self.config)
        self._attributes = AttributeRenderer(self.config, formatter)
        self._parameters = ParameterRenderer(self.config, formatter, self._attributes)
        self._header = HeaderRenderer(self.config)

    def build_header(self, callable_: CallableDescriptor, normalize: bool = True) -> str:
        """
        Build the declaration text for a callable.

        Args:
            callable_: Callable descriptor
            normalize: Strip `$`, `<` and `>` from the whole text

        Returns:
            Attribute lines followed by the header line, each ending with a newline

        Raises:
            InvalidStateError: a parameter reports both `in` and `out`
        """
        lines = self._attributes.render(callable_.attributes)
        parameters = [self._parameters.render(parameter) for parameter in callable_.parameters]
        lines.append(self._header.render(callable_, parameters))

        text = "".join(f"{line}\n" for line in lines)
        if normalize:
            text = self.normalize(text)

        # per-call record, skip the processor chain unless debug is on
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "declaration_built",
                callable=callable_.name,
                attributes=len(lines) - 1,
                parameters=len(parameters),
                normalized=normalize,
            )
        return text

    def normalize(self, text: str) -> str:
        """Remove name-mangling characters, generic brackets included."""
        return text.translate({ord(ch): None for ch in self.config.normalize_characters})


def build_header(
    callable_: CallableDescriptor,
    normalize: bool = True,
    config: RenderConfig | None = None,
) -> str:
    """Convenience wrapper around DeclarationBuilder.build_header."""
    return DeclarationBuilder(config).build_header(callable_, normalize=normalize)
