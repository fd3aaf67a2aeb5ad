"""
Header Renderer

Composes the declaration line:
    visibility [static] [abstract] [virtual] ReturnType Name[<T1, T2>](params)
"""

from __future__ import annotations

from collections.abc import Sequence

from codegraph_decl.config import RenderConfig
from codegraph_decl.models import AccessFlags, CallableDescriptor

# First match wins
VISIBILITY_PRECEDENCE: tuple[tuple[AccessFlags, str], ...] = (
    (AccessFlags.PUBLIC, "public"),
    (AccessFlags.PRIVATE, "private"),
    (AccessFlags.FAMILY, "protected"),
    (AccessFlags.ASSEMBLY, "internal"),
    (AccessFlags.FAMILY_OR_ASSEMBLY, "protected internal"),
    (AccessFlags.FAMILY_AND_ASSEMBLY, "private protected"),
)


def resolve_visibility(access: AccessFlags, default: str = "private") -> str:
    """Map access flags to a visibility token by fixed precedence."""
    for flag, token in VISIBILITY_PRECEDENCE:
        if flag in access:
            return token
    return default


class HeaderRenderer:
    """Builds the header line from callable metadata and already rendered parameters."""

    def __init__(self, config: RenderConfig | None = None):
        self._config = config or RenderConfig()

    def render(self, callable_: CallableDescriptor, rendered_parameters: Sequence[str]) -> str:
        parts = [resolve_visibility(callable_.access, self._config.default_visibility)]

        if callable_.is_static:
            parts.append("static")
        if callable_.is_abstract:
            parts.append("abstract")
        if callable_.is_virtual:
            parts.append("virtual")

        parts.append(callable_.return_type)

        name = callable_.name
        if callable_.generic_parameters:
            name += "<" + ", ".join(callable_.generic_parameters) + ">"
        parts.append(f"{name}({', '.join(rendered_parameters)})")

        return " ".join(parts)
