"""Date and time validators."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from adif_tools.core.schemas import Field
from adif_tools.spec import SpecRegistry
from ..config import DATE_EPOCH_YEAR
from ..context import ValidationContext
from ..models import ValidityResult

DATE_PAT = re.compile(r"[0-9]{8}")
TIME_PAT = re.compile(r"[0-9]{4}(?:[0-9]{2})?")


def validate_date(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """YYYYMMDD, a real calendar date no earlier than 1930."""
    if value == "":
        return ValidityResult.valid()
    if not DATE_PAT.fullmatch(value):
        return ValidityResult.error(f"{field.name} value {value!r} is not a YYYYMMDD date")
    year, month, day = int(value[0:4]), int(value[4:6]), int(value[6:8])
    if year < DATE_EPOCH_YEAR:
        return ValidityResult.error(
            f"{field.name} value {value} is before {DATE_EPOCH_YEAR}"
        )
    try:
        date(year, month, day)
    except ValueError:
        return ValidityResult.error(f"{field.name} value {value} is not a calendar date")
    return ValidityResult.valid()


def validate_time(
    value: str, field: Field, ctx: ValidationContext, registry: Optional[SpecRegistry] = None
) -> ValidityResult:
    """HHMM or HHMMSS on a 24-hour clock."""
    if value == "":
        return ValidityResult.valid()
    if not TIME_PAT.fullmatch(value):
        return ValidityResult.error(f"{field.name} value {value!r} is not an HHMM or HHMMSS time")
    hour, minute = int(value[0:2]), int(value[2:4])
    second = int(value[4:6]) if len(value) == 6 else 0
    if hour > 23 or minute > 59 or second > 59:
        return ValidityResult.error(f"{field.name} value {value} is not a time of day")
    return ValidityResult.valid()
