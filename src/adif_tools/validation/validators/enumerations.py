"""Enumeration validators and the scoped lookup they share.

Scoped lookups run in two phases. First the value is matched against the
display strings of the whole enumeration; then, if the field names a scope
key and the record sets it, candidates are filtered to those whose scope
property equals the key's value. Scope values compare case-insensitively.

Outcomes for closed (Enumeration) and open (EnumeratedString) vocabularies:

=======================  ===============  ==================
case                     Enumeration      EnumeratedString
=======================  ===============  ==================
no match anywhere        error            warning
match, scope unset       valid            valid
match, scope agrees      valid            valid
match, scope disagrees   warning          warning
=======================  ===============  ==================
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from adif_tools.core.errors import SpecConfigurationError
from adif_tools.core.schemas import Enumeration, EnumValue, Field
from adif_tools.spec import SpecRegistry, default_registry
from ..config import BAND_ENUMERATION, BAND_UNITS, get_severity
from ..context import ValidationContext
from ..models import ValidityResult

# "20 M" -> "20m"; only whitespace directly before the unit is dropped
BAND_UNIT_PAT = re.compile(
    r"\s+(" + "|".join(BAND_UNITS) + r")$", re.IGNORECASE
)


def bound_enumeration(field: Field, registry: Optional[SpecRegistry] = None) -> Enumeration:
    """Resolve the enumeration a field is bound to, by name.

    Raises:
        SpecConfigurationError: If the field has no enumeration.
        UnknownEnumerationError: If the enumeration is not in the table.
    """
    if not field.enumeration_name:
        raise SpecConfigurationError(f"Field {field.name} is not bound to an enumeration")
    return (registry or default_registry()).enumeration(field.enumeration_name)


def normalize_band(value: str) -> str:
    """Drop whitespace before a band's unit suffix and lower-case the unit."""
    return BAND_UNIT_PAT.sub(lambda m: m.group(1).lower(), value)


def find_candidates(
    enumeration: Enumeration, value: str, case_sensitive: bool = False
) -> List[EnumValue]:
    """Phase one: every value in the enumeration whose display string matches."""
    if enumeration.name == BAND_ENUMERATION:
        value = normalize_band(value)
    return enumeration.find(value, case_sensitive=case_sensitive)


def in_scope(
    enumeration: Enumeration, candidates: Sequence[EnumValue], scope_value: str
) -> List[EnumValue]:
    """Phase two: candidates whose scope property equals ``scope_value``."""
    prop = enumeration.scope_property
    if prop is None:
        return list(candidates)
    folded = scope_value.casefold()
    return [c for c in candidates if c.property(prop).casefold() == folded]


def _resolve_scoped(
    validator_id: str,
    value: str,
    field: Field,
    ctx: ValidationContext,
    registry: Optional[SpecRegistry],
    case_sensitive: bool,
) -> ValidityResult:
    enumeration = bound_enumeration(field, registry)
    if field.enumeration_scope_field and enumeration.scope_property is None:
        raise SpecConfigurationError(
            f"Field {field.name} is scoped by {field.enumeration_scope_field} but enumeration "
            f"{enumeration.name} declares no scope property"
        )
    candidates = find_candidates(enumeration, value, case_sensitive=case_sensitive)
    if not candidates:
        severity = get_severity(validator_id, "unknown_value")
        return ValidityResult(
            severity, f"{field.name} value {value!r} is not a known {enumeration.name} value"
        )
    scope_field = field.enumeration_scope_field
    if not scope_field:
        return ValidityResult.valid()
    scope_value = ctx(scope_field)
    if scope_value == "":
        return ValidityResult.valid()
    if in_scope(enumeration, candidates, scope_value):
        return ValidityResult.valid()
    message = f"{field.name} value {value!r} is not valid for {scope_field}={scope_value!r}"
    known = _unique(c.property(enumeration.scope_property or "") for c in candidates)
    if known:
        message += f" (known for {scope_field} {', '.join(known)})"
    return ValidityResult(get_severity(validator_id, "scope_mismatch"), message)


def validate_enumeration(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Closed vocabulary, case-insensitive; scoped fields defer to validate_enum_scope."""
    if value == "":
        return ValidityResult.valid()
    if field.enumeration_scope_field:
        return validate_enum_scope(value, field, ctx, registry)
    enumeration = bound_enumeration(field, registry)
    if find_candidates(enumeration, value):
        return ValidityResult.valid()
    return ValidityResult(
        get_severity("enumeration", "unknown_value"),
        f"{field.name} value {value!r} is not a known {enumeration.name} value",
    )


def validate_enum_scope(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Closed vocabulary whose valid set depends on another field, e.g. STATE by DXCC."""
    if value == "":
        return ValidityResult.valid()
    return _resolve_scoped("enum_scope", value, field, ctx, registry, case_sensitive=False)


def validate_string_enum_scope(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Free text with a case-sensitive vocabulary hint, e.g. SUBMODE by MODE."""
    if value == "":
        return ValidityResult.valid()
    return _resolve_scoped("string_enum_scope", value, field, ctx, registry, case_sensitive=True)


def _unique(items) -> List[str]:
    seen: List[str] = []
    for item in items:
        if item and item not in seen:
            seen.append(item)
    return seen
