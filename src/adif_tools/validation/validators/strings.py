"""String family validators.

The four string types form a chain of increasing permissiveness:
String < MultilineString < IntlMultilineString, and String < IntlString.
"""

from __future__ import annotations

from typing import Optional

from adif_tools.core.schemas import Field
from adif_tools.spec import SpecRegistry
from ..config import (
    ASCII_PRINTABLE_MAX,
    ASCII_PRINTABLE_MIN,
    CONTEST_ID_ENUMERATION,
    LINE_SEPARATORS,
)
from ..context import ValidationContext
from ..models import ValidityResult
from .contest import validate_contest_id
from .enumerations import validate_string_enum_scope


def validate_string(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Printable ASCII only; no control characters or line breaks."""
    for i, c in enumerate(value):
        if not ASCII_PRINTABLE_MIN <= c <= ASCII_PRINTABLE_MAX:
            return ValidityResult.error(_bad_char(field, c, i, "printable ASCII"))
    return ValidityResult.valid()


def validate_multiline_string(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Printable ASCII plus carriage return and line feed."""
    for i, c in enumerate(value):
        if c in LINE_SEPARATORS:
            continue
        if not ASCII_PRINTABLE_MIN <= c <= ASCII_PRINTABLE_MAX:
            return ValidityResult.error(_bad_char(field, c, i, "printable ASCII or a line break"))
    return ValidityResult.valid()


def validate_intl_string(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Any Unicode except line breaks."""
    for i, c in enumerate(value):
        if c in LINE_SEPARATORS:
            return ValidityResult.error(
                f"{field.name} has a line break at position {i}; use a multiline field"
            )
    return ValidityResult.valid()


def validate_intl_multiline_string(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    return ValidityResult.valid()


def _bad_char(field: Field, c: str, position: int, allowed: str) -> str:
    return (
        f"{field.name} has character {c!r} (U+{ord(c):04X}) at position {position}, "
        f"only {allowed} is allowed"
    )


def validate_enumerated_string(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """A String field with a soft enumeration (CONTEST_ID, SUBMODE).

    Character rules are checked first; a non-ASCII value is an error whatever
    the vocabulary says.
    """
    result = validate_string(value, field, ctx, registry)
    if not result.is_valid or value == "":
        return result
    if field.enumeration_name == CONTEST_ID_ENUMERATION:
        return validate_contest_id(value, field, ctx, registry)
    if field.enumeration_name:
        return validate_string_enum_scope(value, field, ctx, registry)
    return result
