"""
Declaration Descriptor Models

CallableDescriptor, ParameterDescriptor, AttributeDescriptor, ArgumentValue

Immutable snapshots of a callable's shape, produced by an introspection
collaborator and only read by the renderers.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, Flag, auto
from typing import Any


class ArgumentKind(str, Enum):
    """Kinds of literal argument values."""

    NULL = "null"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOATING = "floating"
    CHARACTER = "character"
    ENUM = "enum"
    TYPE = "type"
    OMITTED = "omitted"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class IntegerWidth(str, Enum):
    """Fixed-width integral types."""

    SBYTE = "sbyte"
    BYTE = "byte"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"

    def __str__(self) -> str:
        return self.value

    @property
    def bounds(self) -> tuple[int, int]:
        """Inclusive (min, max) range for this width."""
        return _INTEGER_BOUNDS[self]


_INTEGER_BOUNDS: dict[IntegerWidth, tuple[int, int]] = {
    IntegerWidth.SBYTE: (-(2**7), 2**7 - 1),
    IntegerWidth.BYTE: (0, 2**8 - 1),
    IntegerWidth.INT16: (-(2**15), 2**15 - 1),
    IntegerWidth.UINT16: (0, 2**16 - 1),
    IntegerWidth.INT32: (-(2**31), 2**31 - 1),
    IntegerWidth.UINT32: (0, 2**32 - 1),
    IntegerWidth.INT64: (-(2**63), 2**63 - 1),
    IntegerWidth.UINT64: (0, 2**64 - 1),
}


class FloatingKind(str, Enum):
    """Floating point precisions."""

    SINGLE = "single"
    DOUBLE = "double"
    DECIMAL = "decimal"

    def __str__(self) -> str:
        return self.value


class AccessFlags(Flag):
    """Visibility flags as reported by the host runtime.

    More than one flag may be set; the header renderer resolves them by precedence.
    """

    NONE = 0
    PUBLIC = auto()
    PRIVATE = auto()
    FAMILY = auto()  # protected
    ASSEMBLY = auto()  # internal
    FAMILY_OR_ASSEMBLY = auto()  # protected internal
    FAMILY_AND_ASSEMBLY = auto()  # private protected


@dataclass(frozen=True)
class ArgumentValue:
    """
    Tagged literal value used as an attribute argument or a parameter default.

    Build instances through the classmethod factories; `kind` selects which of
    the payload fields are meaningful.
    """

    kind: ArgumentKind
    value: Any = None
    width: IntegerWidth | None = None
    precision: FloatingKind | None = None
    type_name: str | None = None  # enum enclosing type, referenced type, or unknown kind name
    member: str | None = None  # enum member

    def __post_init__(self) -> None:
        if self.kind is ArgumentKind.INTEGER:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise ValueError(f"Integer argument requires an int, got: {self.value!r}")
            low, high = (self.width or IntegerWidth.INT32).bounds
            if not low <= self.value <= high:
                raise ValueError(f"Integer {self.value} out of range for {self.width}: [{low}, {high}]")
        elif self.kind is ArgumentKind.CHARACTER:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"Character argument requires exactly one character, got: {self.value!r}")
        elif self.kind is ArgumentKind.STRING:
            if not isinstance(self.value, str):
                raise ValueError(f"String argument requires a str, got: {self.value!r}")
        elif self.kind is ArgumentKind.BOOLEAN:
            if not isinstance(self.value, bool):
                raise ValueError(f"Boolean argument requires a bool, got: {self.value!r}")
        elif self.kind is ArgumentKind.FLOATING:
            self._check_floating()

    def _check_floating(self) -> None:
        # Unrecognized precisions are left to the formatter's invariant check
        if self.precision is FloatingKind.DECIMAL:
            if not isinstance(self.value, Decimal) or not self.value.is_finite():
                raise ValueError(f"Decimal argument requires a finite Decimal, got: {self.value!r}")
        elif self.precision in (FloatingKind.SINGLE, FloatingKind.DOUBLE):
            if not isinstance(self.value, float):
                raise ValueError(f"{self.precision} argument requires a float, got: {self.value!r}")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def null(cls) -> ArgumentValue:
        return cls(ArgumentKind.NULL)

    @classmethod
    def string(cls, value: str) -> ArgumentValue:
        return cls(ArgumentKind.STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> ArgumentValue:
        return cls(ArgumentKind.BOOLEAN, bool(value))

    @classmethod
    def integer(cls, value: int, width: IntegerWidth = IntegerWidth.INT32) -> ArgumentValue:
        return cls(ArgumentKind.INTEGER, value, width=width)

    @classmethod
    def floating(cls, value: float | Decimal | str, precision: FloatingKind = FloatingKind.DOUBLE) -> ArgumentValue:
        if precision is FloatingKind.DECIMAL:
            value = value if isinstance(value, Decimal) else Decimal(str(value))
        else:
            value = float(value)
        return cls(ArgumentKind.FLOATING, value, precision=precision)

    @classmethod
    def single(cls, value: float) -> ArgumentValue:
        return cls.floating(value, FloatingKind.SINGLE)

    @classmethod
    def double(cls, value: float) -> ArgumentValue:
        return cls.floating(value, FloatingKind.DOUBLE)

    @classmethod
    def decimal(cls, value: Decimal | str | int) -> ArgumentValue:
        return cls.floating(value, FloatingKind.DECIMAL)

    @classmethod
    def character(cls, value: str) -> ArgumentValue:
        return cls(ArgumentKind.CHARACTER, value)

    @classmethod
    def enum_member(cls, enclosing_type: str, member: str) -> ArgumentValue:
        return cls(ArgumentKind.ENUM, type_name=enclosing_type, member=member)

    @classmethod
    def type_ref(cls, qualified_name: str) -> ArgumentValue:
        return cls(ArgumentKind.TYPE, type_name=qualified_name)

    @classmethod
    def omitted(cls) -> ArgumentValue:
        return cls(ArgumentKind.OMITTED)

    @classmethod
    def unknown(cls, reported_type_name: str | None = None, value: Any = None) -> ArgumentValue:
        return cls(ArgumentKind.UNKNOWN, value, type_name=reported_type_name)


@dataclass(frozen=True)
class AttributeDescriptor:
    """Annotation attached to a callable or parameter."""

    type_name: str
    positional: tuple[ArgumentValue, ...] = ()
    named: tuple[tuple[str, ArgumentValue], ...] = ()


@dataclass(frozen=True)
class ParameterDescriptor:
    """
    Parameter of a callable.

    Attributes:
        name: Declared parameter name
        type_name: Qualified type name
        is_in: `in` direction modifier
        is_out: `out` direction modifier (never both with is_in on valid input)
        default: Default value, None when the parameter has no default
        attributes: Annotations attached to the parameter
    """

    name: str
    type_name: str
    is_in: bool = False
    is_out: bool = False
    default: ArgumentValue | None = None
    attributes: tuple[AttributeDescriptor, ...] = ()


@dataclass(frozen=True)
class CallableDescriptor:
    """Shape of a callable at inspection time."""

    name: str
    return_type: str
    access: AccessFlags = AccessFlags.NONE
    is_static: bool = False
    is_abstract: bool = False
    is_virtual: bool = False
    generic_parameters: tuple[str, ...] = ()
    parameters: tuple[ParameterDescriptor, ...] = ()
    attributes: tuple[AttributeDescriptor, ...] = ()
