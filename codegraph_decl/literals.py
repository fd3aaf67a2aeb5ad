"""
Literal Value Formatter

Converts a single ArgumentValue into the text it would have in a declaration.

Formatting is total: every kind yields text, unrecognized kinds yield a
placeholder. Numeric output never depends on the process locale.
"""

from __future__ import annotations

import logging
import math
import struct
from collections.abc import Callable
from decimal import Decimal

from codegraph_decl.config import RenderConfig
from codegraph_decl.logging import get_logger
from codegraph_decl.models import ArgumentKind, ArgumentValue, FloatingKind

logger = get_logger(__name__)

_SINGLE_MAX_DIGITS = 9

# Fixed-point cutoffs of the invariant general format
_DOUBLE_PRECISION = 15
_SINGLE_PRECISION = 7


def _to_single(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def _format_general(value: float, precision: int) -> str:
    """
    Invariant general format over the shortest round-trip digits of a float.

    Fixed notation while the decimal point sits within max(digit count, precision)
    digits and no more than three zeros follow the radix point, otherwise
    scientific with a signed two-digit exponent:

        1.0   -> 1
        1e14  -> 100000000000000
        1e20  -> 1E+20
        1e-05 -> 1E-05
    """
    # repr digits are the shortest round trip and never depend on the locale
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    prefix = "-" if sign else ""
    significant = "".join(map(str, digits)).rstrip("0")
    if not significant:
        return f"{prefix}0"

    point = len(digits) + exponent
    if point > max(len(significant), precision) or point < -3:
        mantissa = significant[0]
        if len(significant) > 1:
            mantissa += "." + significant[1:]
        power = point - 1
        return f"{prefix}{mantissa}E{'-' if power < 0 else '+'}{abs(power):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{significant}"
    if point >= len(significant):
        return prefix + significant + "0" * (point - len(significant))
    return f"{prefix}{significant[:point]}.{significant[point:]}"


def _format_double(value: float) -> str:
    if not math.isfinite(value):
        return _format_non_finite(value)
    return _format_general(value, _DOUBLE_PRECISION)


def _shortest_single(single: float) -> float:
    """Shortest decimal that reads back as the same binary32 value."""
    for digits in range(1, _SINGLE_MAX_DIGITS + 1):
        candidate = float(f"{single:.{digits}g}")
        try:
            if _to_single(candidate) == single:
                return candidate
        except OverflowError:
            # rounded past the binary32 maximum, needs more digits
            continue
    return single


def _format_single(value: float) -> str:
    if not math.isfinite(value):
        return _format_non_finite(value)
    try:
        single = _to_single(value)
    except OverflowError:
        return _format_non_finite(math.copysign(math.inf, value))
    return _format_general(_shortest_single(single), _SINGLE_PRECISION)


def _format_decimal(value: Decimal) -> str:
    # "f" keeps the scale (1.50) and never switches to an exponent (1E-7)
    return format(value, "f")


_FLOATING_FORMATTERS: dict[FloatingKind, Callable] = {
    FloatingKind.SINGLE: _format_single,
    FloatingKind.DOUBLE: _format_double,
    FloatingKind.DECIMAL: _format_decimal,
}


class LiteralFormatter:
    """
    Formats tagged argument values.

    Rules by kind:
        null      -> null
        string    -> "text" with \\ and " escaped
        boolean   -> true / false
        integer   -> plain base-10 digits
        floating  -> invariant decimal text
        character -> 'c'
        enum      -> Enclosing.Member
        type      -> typeof(Full.Name)
        omitted   -> empty text
        unknown   -> <unknown argument> (of type Name)
    """

    def __init__(self, config: RenderConfig | None = None):
        self._config = config or RenderConfig()
        self._handlers: dict[ArgumentKind, Callable[[ArgumentValue], str]] = {
            ArgumentKind.NULL: self._format_null,
            ArgumentKind.STRING: self._format_string,
            ArgumentKind.BOOLEAN: self._format_boolean,
            ArgumentKind.INTEGER: self._format_integer,
            ArgumentKind.FLOATING: self._format_floating,
            ArgumentKind.CHARACTER: self._format_character,
            ArgumentKind.ENUM: self._format_enum,
            ArgumentKind.TYPE: self._format_type,
            ArgumentKind.OMITTED: self._format_omitted,
            ArgumentKind.UNKNOWN: self._format_unknown,
        }

    def format(self, value: ArgumentValue) -> str:
        handler = self._handlers.get(value.kind)
        if handler is None:
            return self._placeholder(str(value.kind))
        return handler(value)

    def _format_null(self, value: ArgumentValue) -> str:
        return "null"

    def _format_string(self, value: ArgumentValue) -> str:
        # Backslashes first so the ones inserted for quotes are not doubled
        contents = str(value.value).replace("\\", "\\\\").replace('"', '\\"')
        return f'"{contents}"'

    def _format_boolean(self, value: ArgumentValue) -> str:
        return "true" if value.value else "false"

    def _format_integer(self, value: ArgumentValue) -> str:
        return str(int(value.value))

    def _format_floating(self, value: ArgumentValue) -> str:
        formatter = _FLOATING_FORMATTERS.get(value.precision)
        if formatter is None:
            raise AssertionError(f"Unreachable floating-point kind: {value.precision!r}")
        return formatter(value.value)

    def _format_character(self, value: ArgumentValue) -> str:
        return f"'{value.value}'"

    def _format_enum(self, value: ArgumentValue) -> str:
        enclosing = (value.type_name or "").rsplit(".", 1)[-1]
        return f"{enclosing}.{value.member}"

    def _format_type(self, value: ArgumentValue) -> str:
        return f"typeof({value.type_name})"

    def _format_omitted(self, value: ArgumentValue) -> str:
        return ""

    def _format_unknown(self, value: ArgumentValue) -> str:
        return self._placeholder(value.type_name)

    def _placeholder(self, type_name: str | None) -> str:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("unknown_argument_kind", type_name=type_name)
        return f"{self._config.unknown_argument_placeholder} (of type {type_name or 'null'})"


_default_formatter = LiteralFormatter()


def format_argument(value: ArgumentValue, config: RenderConfig | None = None) -> str:
    """Format a single argument value with the default (or given) config."""
    if config is None:
        return _default_formatter.format(value)
    return LiteralFormatter(config).format(value)
