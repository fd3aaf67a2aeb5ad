"""
Parameter Renderer Tests
"""

import pytest

from codegraph_decl.config import RUNTIME_ATTRIBUTE_DATA
from codegraph_decl.exceptions import DeclarationError, InvalidStateError
from codegraph_decl.models import ArgumentValue, AttributeDescriptor, ParameterDescriptor
from codegraph_decl.parameters import ParameterRenderer


@pytest.fixture
def renderer() -> ParameterRenderer:
    return ParameterRenderer()


class TestParameterRendering:
    def test_plain(self, renderer):
        assert renderer.render(ParameterDescriptor("a", "System.Int32")) == "System.Int32 a"

    def test_in_modifier(self, renderer):
        param = ParameterDescriptor("value", "System.Decimal", is_in=True)
        assert renderer.render(param) == "in System.Decimal value"

    def test_out_modifier(self, renderer):
        param = ParameterDescriptor("result", "System.Int32&", is_out=True)
        assert renderer.render(param) == "out System.Int32& result"

    def test_default_value(self, renderer):
        param = ParameterDescriptor("name", "System.String", default=ArgumentValue.string("x"))
        assert renderer.render(param) == 'System.String name = "x"'

    def test_null_default(self, renderer):
        param = ParameterDescriptor("obj", "System.Object", default=ArgumentValue.null())
        assert renderer.render(param) == "System.Object obj = null"

    def test_omitted_default_suppressed(self, renderer):
        param = ParameterDescriptor("count", "System.Int32", default=ArgumentValue.omitted())
        assert renderer.render(param) == "System.Int32 count"

    def test_attributes_prepended(self, renderer):
        param = ParameterDescriptor(
            "path",
            "System.String",
            attributes=(
                AttributeDescriptor("NotNull"),
                AttributeDescriptor("CallerFilePath"),
            ),
            default=ArgumentValue.string(""),
        )
        assert renderer.render(param) == '[NotNull()] [CallerFilePath()] System.String path = ""'

    def test_attributes_before_modifier(self, renderer):
        param = ParameterDescriptor(
            "x",
            "System.Double",
            is_in=True,
            attributes=(AttributeDescriptor("Range", positional=(ArgumentValue.double(0.5),)),),
        )
        assert renderer.render(param) == "[Range(0.5)] in System.Double x"

    def test_only_ignored_attributes_leave_no_prefix(self, renderer):
        param = ParameterDescriptor("a", "System.Int32", attributes=(AttributeDescriptor(RUNTIME_ATTRIBUTE_DATA),))
        assert renderer.render(param) == "System.Int32 a"


class TestInvalidState:
    def test_in_and_out_raises(self, renderer):
        param = ParameterDescriptor("broken", "System.Int32", is_in=True, is_out=True)

        with pytest.raises(InvalidStateError) as exc_info:
            renderer.render(param)

        assert exc_info.value.parameter_name == "broken"
        assert "broken" in str(exc_info.value)

    def test_is_declaration_error(self):
        assert issubclass(InvalidStateError, DeclarationError)

    def test_error_is_logged(self, renderer, caplog):
        param = ParameterDescriptor("broken", "System.Int32", is_in=True, is_out=True)

        with pytest.raises(InvalidStateError):
            renderer.render(param)

        assert "parameter_in_and_out" in caplog.text
