"""Core utility functions shared across the package."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any


def normalize_field_name(name: str) -> str:
    """Return the canonical (upper-case, trimmed) form of an ADIF field name.

    Examples:
        >>> normalize_field_name(" qso_date ")
        'QSO_DATE'
    """
    return name.strip().upper()


def raw_value(value: Any) -> str:
    """Convert a cell from a record table into a raw field string.

    ``None`` and NaN (how pandas marks absent cells) become "". A numeric
    column with gaps is stored as floats, so whole floats lose their ".0".

    Examples:
        >>> raw_value(291.0)
        '291'
        >>> raw_value(14.074)
        '14.074'
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def get_report_paths(log_path: Path, report_dir: Path | None = None) -> tuple[Path, Path]:
    """Get Markdown and JSON report paths for a validated log file.

    Reports sit next to the log file unless ``report_dir`` is given.

    Examples:
        >>> md, js = get_report_paths(Path("logs/field_day.csv"))
        >>> print(md)
        logs/field_day_validation.md
        >>> print(js)
        logs/field_day_validation.json
    """
    directory = report_dir if report_dir is not None else log_path.parent
    stem = log_path.stem
    return directory / f"{stem}_validation.md", directory / f"{stem}_validation.json"
