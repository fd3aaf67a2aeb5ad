"""
Parameter Renderer

Renders one parameter descriptor, e.g.
    [NotNull()] in System.String name = "x"
"""

from __future__ import annotations

from codegraph_decl.attributes import AttributeRenderer
from codegraph_decl.config import RenderConfig
from codegraph_decl.exceptions import InvalidStateError
from codegraph_decl.literals import LiteralFormatter
from codegraph_decl.logging import get_logger
from codegraph_decl.models import ParameterDescriptor

logger = get_logger(__name__)


class ParameterRenderer:
    """
    Converts a parameter descriptor to text.

    Layout: [attributes] [in|out] Type name [= default]

    Raises:
        InvalidStateError: parameter reports both `in` and `out`
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        formatter: LiteralFormatter | None = None,
        attribute_renderer: AttributeRenderer | None = None,
    ):
        self._config = config or RenderConfig()
        self._formatter = formatter or LiteralFormatter(self._config)
        self._attributes = attribute_renderer or AttributeRenderer(self._config, self._formatter)

    def render(self, parameter: ParameterDescriptor) -> str:
        if parameter.is_in and parameter.is_out:
            logger.error("parameter_in_and_out", parameter=parameter.name, type_name=parameter.type_name)
            raise InvalidStateError("Parameter cannot have both in and out flags", parameter_name=parameter.name)

        parts = []

        if parameter.attributes:
            lines = self._attributes.render(parameter.attributes)
            if lines:
                parts.append(" ".join(lines))

        if parameter.is_in:
            parts.append("in")
        elif parameter.is_out:
            parts.append("out")

        parts.append(parameter.type_name)
        parts.append(parameter.name)
        text = " ".join(parts)

        if parameter.default is not None:
            default_text = self._formatter.format(parameter.default)
            if default_text:
                text = f"{text} = {default_text}"

        return text
