"""Validation context: the caller's view of the record being validated.

A context is any callable taking a field name and returning that field's
current raw value, or "" when the field is absent. Validators only use it to
resolve scope keys (e.g. the DXCC entity a STATE value must belong to).
"""

from __future__ import annotations

from typing import Any, Callable, Mapping

from adif_tools.core.utils import normalize_field_name, raw_value

ValidationContext = Callable[[str], str]


def empty_context() -> ValidationContext:
    """Return a context in which every field is unset."""
    return _empty


def _empty(name: str) -> str:
    return ""


def mapping_context(values: Mapping[str, Any]) -> ValidationContext:
    """Return a context answering from a record-like mapping.

    Field names are matched case-insensitively. ``None`` and NaN count as unset.

    Examples:
        >>> ctx = mapping_context({"dxcc": "291", "STATE": "CA"})
        >>> ctx("DXCC")
        '291'
        >>> ctx("MY_DXCC")
        ''
    """
    normalized = {normalize_field_name(str(k)): raw_value(v) for k, v in values.items()}

    def field_value(name: str) -> str:
        return normalized.get(normalize_field_name(name), "")

    return field_value


__all__ = ["ValidationContext", "empty_context", "mapping_context"]
