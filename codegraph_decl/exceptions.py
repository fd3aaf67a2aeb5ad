"""
Custom exceptions for declaration rendering.

Hierarchy:
- DeclarationError (base)
  - InvalidStateError (descriptor reports an impossible runtime state)
  - DescriptorLoadError (malformed descriptor payload)

Unknown argument kinds are not errors; the literal formatter renders a placeholder.
"""

from __future__ import annotations


class DeclarationError(Exception):
    """Base exception for all declaration rendering errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{super().__str__()} [{ctx_str}]"
        return super().__str__()


class InvalidStateError(DeclarationError):
    """Parameter carries both `in` and `out` direction flags."""

    def __init__(self, message: str, parameter_name: str | None = None):
        context = {}
        if parameter_name:
            context["parameter"] = parameter_name
        super().__init__(message, context)
        self.parameter_name = parameter_name


class DescriptorLoadError(DeclarationError):
    """Descriptor payload could not be validated."""

    def __init__(self, message: str, errors: list | None = None):
        context = {}
        if errors:
            context["error_count"] = len(errors)
        super().__init__(message, context)
        self.errors = errors or []
