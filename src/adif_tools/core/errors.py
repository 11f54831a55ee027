"""Configuration fault exceptions.

Malformed field *values* are never raised; they are reported as
``ValidityResult`` objects. The exceptions below signal problems with the
tables or the caller's use of them, which should stop processing.
"""

from __future__ import annotations


class SpecConfigurationError(ValueError):
    """Field or enumeration tables are malformed or used incorrectly."""


class UnknownDataTypeError(SpecConfigurationError):
    """No validator is registered for a data type name."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Unknown data type: {type_name}")
        self.type_name = type_name


class UnknownFieldError(SpecConfigurationError):
    """A field name is not present in the field table."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Unknown field: {field_name}")
        self.field_name = field_name


class UnknownEnumerationError(SpecConfigurationError):
    """An enumeration name is not present in the enumeration table."""

    def __init__(self, enumeration_name: str) -> None:
        super().__init__(f"Unknown enumeration: {enumeration_name}")
        self.enumeration_name = enumeration_name


__all__ = [
    "SpecConfigurationError",
    "UnknownDataTypeError",
    "UnknownFieldError",
    "UnknownEnumerationError",
]
