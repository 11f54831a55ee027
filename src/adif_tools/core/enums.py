"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum, IntEnum


class DataType(str, Enum):
    """ADIF data types understood by the validation engine.

    Values are the data type names used in the field tables.
    """

    BOOLEAN = "Boolean"
    NUMBER = "Number"
    INTEGER = "Integer"
    POSITIVE_INTEGER = "PositiveInteger"
    DATE = "Date"
    TIME = "Time"
    STRING = "String"
    MULTILINE_STRING = "MultilineString"
    INTL_STRING = "IntlString"
    INTL_MULTILINE_STRING = "IntlMultilineString"
    ENUMERATION = "Enumeration"
    ENUMERATED_STRING = "EnumeratedString"


class Validity(IntEnum):
    """Outcome of validating one field value.

    Ordered by severity so callers can use ``max()`` to find the worst result.
    """

    VALID = 0
    INVALID_WARNING = 1
    INVALID_ERROR = 2

    @property
    def label(self) -> str:
        """Short lower-case name used in reports ("valid", "warning", "error")."""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label


_LABELS = {
    Validity.VALID: "valid",
    Validity.INVALID_WARNING: "warning",
    Validity.INVALID_ERROR: "error",
}


__all__ = ["DataType", "Validity"]
