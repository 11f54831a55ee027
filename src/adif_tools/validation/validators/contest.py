"""CONTEST_ID validation.

Contest identifiers are free text that should match the shared Contest_ID
vocabulary when possible. Hyphen, underscore and space are treated as the same
word separator for matching, so "CO_QSO_PARTY" is recognized as a misspelling
of "CO-QSO-PARTY" rather than an unknown contest. Nothing here is ever an
error: programs may log contests the vocabulary does not list yet.
"""

from __future__ import annotations

from typing import Optional

from adif_tools.core.schemas import Field
from adif_tools.spec import SpecRegistry
from ..config import CONTEST_ID_CANONICAL_SEPARATOR, CONTEST_ID_SEPARATORS, get_severity
from ..context import ValidationContext
from ..models import ValidityResult
from .enumerations import bound_enumeration


def normalize_contest_id(value: str) -> str:
    """Upper-case ``value`` and replace every separator with the canonical one.

    Examples:
        >>> normalize_contest_id("il qso_party")
        'IL-QSO-PARTY'
    """
    result = value.upper()
    for sep in CONTEST_ID_SEPARATORS:
        result = result.replace(sep, CONTEST_ID_CANONICAL_SEPARATOR)
    return result


def validate_contest_id(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    if value == "":
        return ValidityResult.valid()
    enumeration = bound_enumeration(field, registry)
    if enumeration.find(value):
        return ValidityResult.valid()
    normalized = normalize_contest_id(value)
    for candidate in enumeration.values:
        if normalize_contest_id(candidate.display) == normalized:
            return ValidityResult(
                get_severity("contest_id", "separator_mismatch"),
                f"{field.name} value {value!r} should be written {candidate.display!r}",
            )
    return ValidityResult(
        get_severity("contest_id", "unknown_value"),
        f"{field.name} value {value!r} is not a known contest; "
        f"other programs may not recognize it",
    )
