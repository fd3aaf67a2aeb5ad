"""
Declaration Rendering

Renders source-like declarations (annotations + header line) for callables
from immutable descriptor graphs.
"""

from codegraph_decl.attributes import AttributeRenderer
from codegraph_decl.builder import DeclarationBuilder, build_header
from codegraph_decl.config import RenderConfig
from codegraph_decl.exceptions import DeclarationError, DescriptorLoadError, InvalidStateError
from codegraph_decl.header import HeaderRenderer, resolve_visibility
from codegraph_decl.literals import LiteralFormatter, format_argument
from codegraph_decl.loader import load_callable, load_callable_file, load_callable_json, load_callable_yaml
from codegraph_decl.models import (
    AccessFlags,
    ArgumentKind,
    ArgumentValue,
    AttributeDescriptor,
    CallableDescriptor,
    FloatingKind,
    IntegerWidth,
    ParameterDescriptor,
)
from codegraph_decl.parameters import ParameterRenderer

__version__ = "0.1.0"

__all__ = [
    "AccessFlags",
    "ArgumentKind",
    "ArgumentValue",
    "AttributeDescriptor",
    "AttributeRenderer",
    "CallableDescriptor",
    "DeclarationBuilder",
    "DeclarationError",
    "DescriptorLoadError",
    "FloatingKind",
    "HeaderRenderer",
    "IntegerWidth",
    "InvalidStateError",
    "LiteralFormatter",
    "ParameterDescriptor",
    "ParameterRenderer",
    "RenderConfig",
    "build_header",
    "format_argument",
    "load_callable",
    "load_callable_file",
    "load_callable_json",
    "load_callable_yaml",
    "resolve_visibility",
]
