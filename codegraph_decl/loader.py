"""
Descriptor Payload Loader

Builds descriptors from JSON-like mappings (or JSON/YAML documents), so any host
able to dump its reflection metadata can feed the renderers.

Example payload:
    {
        "name": "Add",
        "return_type": "System.Int32",
        "access": ["public"],
        "parameters": [
            {"name": "a", "type": "System.Int32", "default": {"kind": "integer", "value": 1}}
        ],
        "attributes": [
            {"type": "ObsoleteAttribute", "positional": [{"kind": "string", "value": "old"}]}
        ]
    }
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import reduce
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from codegraph_decl.exceptions import DescriptorLoadError
from codegraph_decl.logging import get_logger
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

logger = get_logger(__name__)

ACCESS_NAMES: dict[str, AccessFlags] = {
    "public": AccessFlags.PUBLIC,
    "private": AccessFlags.PRIVATE,
    "protected": AccessFlags.FAMILY,
    "family": AccessFlags.FAMILY,
    "internal": AccessFlags.ASSEMBLY,
    "assembly": AccessFlags.ASSEMBLY,
    "protected internal": AccessFlags.FAMILY_OR_ASSEMBLY,
    "family_or_assembly": AccessFlags.FAMILY_OR_ASSEMBLY,
    "private protected": AccessFlags.FAMILY_AND_ASSEMBLY,
    "family_and_assembly": AccessFlags.FAMILY_AND_ASSEMBLY,
}


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ArgumentPayload(_Payload):
    kind: ArgumentKind
    value: Any = None
    width: IntegerWidth = IntegerWidth.INT32
    precision: FloatingKind = FloatingKind.DOUBLE
    type_name: str | None = Field(default=None, alias="type")
    member: str | None = None

    @model_validator(mode="after")
    def validate_kind_fields(self) -> "ArgumentPayload":
        """Reject payloads whose fields do not fit the declared kind.

        - string: value must be a string
        - boolean: value must be true/false (no "false" strings)
        - integer: value must be an integer
        - floating: single/double take a number, decimal also a numeric string
        - enum: type and member required
        - type: type required
        """
        kind = self.kind
        value = self.value
        if kind is ArgumentKind.STRING and not isinstance(value, str):
            raise ValueError(f"string argument requires a string value, got: {value!r}")
        if kind is ArgumentKind.BOOLEAN and not isinstance(value, bool):
            raise ValueError(f"boolean argument requires true or false, got: {value!r}")
        if kind is ArgumentKind.INTEGER and (isinstance(value, bool) or not isinstance(value, int)):
            raise ValueError(f"integer argument requires an integer value, got: {value!r}")
        if kind is ArgumentKind.FLOATING:
            numeric = not isinstance(value, bool) and isinstance(value, (int, float))
            if not (numeric or (self.precision is FloatingKind.DECIMAL and isinstance(value, str))):
                raise ValueError(f"{self.precision} argument requires a numeric value, got: {value!r}")
        if kind is ArgumentKind.CHARACTER and not isinstance(value, str):
            raise ValueError(f"character argument requires a string value, got: {value!r}")
        if kind is ArgumentKind.ENUM and not (self.type_name and self.member):
            raise ValueError("enum argument requires both type and member")
        if kind is ArgumentKind.TYPE and not self.type_name:
            raise ValueError("type argument requires a type name")
        return self

    def to_value(self) -> ArgumentValue:
        kind = self.kind
        if kind is ArgumentKind.NULL:
            return ArgumentValue.null()
        if kind is ArgumentKind.STRING:
            return ArgumentValue.string(self.value)
        if kind is ArgumentKind.BOOLEAN:
            return ArgumentValue.boolean(self.value)
        if kind is ArgumentKind.INTEGER:
            return ArgumentValue.integer(self.value, self.width)
        if kind is ArgumentKind.FLOATING:
            return ArgumentValue.floating(self.value, self.precision)
        if kind is ArgumentKind.CHARACTER:
            return ArgumentValue.character(self.value)
        if kind is ArgumentKind.ENUM:
            return ArgumentValue.enum_member(self.type_name, self.member)
        if kind is ArgumentKind.TYPE:
            return ArgumentValue.type_ref(self.type_name)
        if kind is ArgumentKind.OMITTED:
            return ArgumentValue.omitted()
        return ArgumentValue.unknown(self.type_name, self.value)


class NamedArgumentPayload(_Payload):
    name: str
    value: ArgumentPayload


class AttributePayload(_Payload):
    type_name: str = Field(alias="type")
    positional: list[ArgumentPayload] = Field(default_factory=list)
    named: list[NamedArgumentPayload] = Field(default_factory=list)

    def to_descriptor(self) -> AttributeDescriptor:
        return AttributeDescriptor(
            type_name=self.type_name,
            positional=tuple(arg.to_value() for arg in self.positional),
            named=tuple((arg.name, arg.value.to_value()) for arg in self.named),
        )


class ParameterPayload(_Payload):
    name: str
    type_name: str = Field(alias="type")
    is_in: bool = False
    is_out: bool = False
    default: ArgumentPayload | None = None
    attributes: list[AttributePayload] = Field(default_factory=list)

    def to_descriptor(self) -> ParameterDescriptor:
        return ParameterDescriptor(
            name=self.name,
            type_name=self.type_name,
            is_in=self.is_in,
            is_out=self.is_out,
            default=self.default.to_value() if self.default is not None else None,
            attributes=tuple(attr.to_descriptor() for attr in self.attributes),
        )


class CallablePayload(_Payload):
    name: str
    return_type: str
    access: list[str] = Field(default_factory=list)
    is_static: bool = False
    is_abstract: bool = False
    is_virtual: bool = False
    generic_parameters: list[str] = Field(default_factory=list)
    parameters: list[ParameterPayload] = Field(default_factory=list)
    attributes: list[AttributePayload] = Field(default_factory=list)

    @field_validator("access")
    @classmethod
    def _known_access(cls, names: list[str]) -> list[str]:
        unknown = [name for name in names if name.lower() not in ACCESS_NAMES]
        if unknown:
            raise ValueError(f"Unknown access modifiers: {unknown}")
        return names

    def to_descriptor(self) -> CallableDescriptor:
        access = reduce(lambda acc, name: acc | ACCESS_NAMES[name.lower()], self.access, AccessFlags.NONE)
        return CallableDescriptor(
            name=self.name,
            return_type=self.return_type,
            access=access,
            is_static=self.is_static,
            is_abstract=self.is_abstract,
            is_virtual=self.is_virtual,
            generic_parameters=tuple(self.generic_parameters),
            parameters=tuple(param.to_descriptor() for param in self.parameters),
            attributes=tuple(attr.to_descriptor() for attr in self.attributes),
        )


def load_callable(payload: Mapping[str, Any]) -> CallableDescriptor:
    """
    Validate a payload and build the callable descriptor.

    Raises:
        DescriptorLoadError: payload shape or a literal value is invalid
    """
    try:
        model = CallablePayload.model_validate(payload)
    except ValidationError as e:
        raise DescriptorLoadError("Invalid callable payload", errors=e.errors()) from e

    try:
        return model.to_descriptor()
    except (TypeError, ValueError, ArithmeticError) as e:
        raise DescriptorLoadError(f"Invalid argument value: {e}") from e


def load_callable_json(text: str) -> CallableDescriptor:
    """Parse a JSON document and build the callable descriptor."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DescriptorLoadError(f"Invalid JSON: {e.msg}") from e
    if not isinstance(payload, dict):
        raise DescriptorLoadError("Callable payload must be a JSON object")
    return load_callable(payload)


def load_callable_yaml(text: str) -> CallableDescriptor:
    """Parse a YAML document and build the callable descriptor."""
    try:
        payload = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DescriptorLoadError(f"Invalid YAML: {e}") from e
    if not isinstance(payload, dict):
        raise DescriptorLoadError("Callable payload must be a mapping")
    return load_callable(payload)


def load_callable_file(path: str | Path) -> CallableDescriptor:
    """
    Load a callable descriptor from a .json, .yaml or .yml file.

    Raises:
        DescriptorLoadError: file missing, unsupported suffix, or invalid payload
    """
    path = Path(path)
    if not path.is_file():
        raise DescriptorLoadError(f"Descriptor file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        parse = load_callable_json
    elif suffix in (".yaml", ".yml"):
        parse = load_callable_yaml
    else:
        raise DescriptorLoadError(f"Unsupported descriptor file type: {suffix or path.name}")

    descriptor = parse(path.read_text(encoding="utf-8"))
    logger.debug("descriptor_loaded", path=str(path), callable=descriptor.name)
    return descriptor
