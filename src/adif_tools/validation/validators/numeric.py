"""Boolean and numeric validators.

Numbers use ASCII digits only: no leading plus, no exponent, no grouping
separators, no digits from other scripts. Bounds are compared exactly with
Decimal.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional

from adif_tools.core.schemas import Field
from adif_tools.spec import SpecRegistry
from ..config import POSITIVE_INTEGER_MIN
from ..context import ValidationContext
from ..models import ValidityResult

# A trailing decimal point ("9876.") is accepted, a lone "." is not
NUMBER_PAT = re.compile(r"-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
INTEGER_PAT = re.compile(r"-?[0-9]+")


def validate_boolean(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Y or N, in either case."""
    if value == "" or value in ("Y", "y", "N", "n"):
        return ValidityResult.valid()
    return ValidityResult.error(f"{field.name} value {value!r} is not a Boolean, expected Y or N")


def validate_number(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    if value == "":
        return ValidityResult.valid()
    if not NUMBER_PAT.fullmatch(value):
        return ValidityResult.error(f"{field.name} value {value!r} is not a decimal number")
    return _check_range(value, Decimal(value), field, field.min_value, field.max_value)


def validate_integer(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    if value == "":
        return ValidityResult.valid()
    if not INTEGER_PAT.fullmatch(value):
        return ValidityResult.error(f"{field.name} value {value!r} is not an integer")
    return _check_range(value, Decimal(value), field, field.min_value, field.max_value)


def validate_positive_integer(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """Integer grammar with a minimum of at least 1."""
    if value == "":
        return ValidityResult.valid()
    if not INTEGER_PAT.fullmatch(value):
        return ValidityResult.error(f"{field.name} value {value!r} is not a positive integer")
    minimum = Decimal(POSITIVE_INTEGER_MIN)
    if field.min_value is not None and field.min_value > minimum:
        minimum = field.min_value
    return _check_range(value, Decimal(value), field, minimum, field.max_value)


def _check_range(
    value: str,
    number: Decimal,
    field: Field,
    minimum: Optional[Decimal],
    maximum: Optional[Decimal],
) -> ValidityResult:
    if minimum is not None and number < minimum:
        return ValidityResult.error(f"{field.name} value {value} is below minimum {minimum}")
    if maximum is not None and number > maximum:
        return ValidityResult.error(f"{field.name} value {value} is above maximum {maximum}")
    return ValidityResult.valid()
