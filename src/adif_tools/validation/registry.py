"""Validator dispatch table and log runner.

This module orchestrates validation:
- TYPE_VALIDATORS: Data type to validator function
- validate_value() / validate_field(): Validate one value
- validate_record(): Validate every field of one record
- run_validation(): Validate a table of records and return a ValidationReport
- print_report(): Display validation results to console
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, List, Mapping, Optional, Union

import pandas as pd

from adif_tools.core.enums import DataType
from adif_tools.core.errors import UnknownDataTypeError
from adif_tools.core.schemas import Field
from adif_tools.core.utils import normalize_field_name, raw_value
from adif_tools.spec import SpecRegistry, default_registry
from .config import APP_FIELD_PREFIX, get_severity
from .context import ValidationContext, empty_context, mapping_context
from .models import FieldIssue, ValidationReport, ValidityResult
from .validators import TypeValidator
from .validators.dates import validate_date, validate_time
from .validators.enumerations import validate_enumeration
from .validators.numeric import (
    validate_boolean,
    validate_integer,
    validate_number,
    validate_positive_integer,
)
from .validators.strings import (
    validate_enumerated_string,
    validate_intl_multiline_string,
    validate_intl_string,
    validate_multiline_string,
    validate_string,
)

logger = logging.getLogger(__name__)


# One validator per data type
TYPE_VALIDATORS: Mapping[DataType, TypeValidator] = MappingProxyType(
    {
        DataType.BOOLEAN: validate_boolean,
        DataType.NUMBER: validate_number,
        DataType.INTEGER: validate_integer,
        DataType.POSITIVE_INTEGER: validate_positive_integer,
        DataType.DATE: validate_date,
        DataType.TIME: validate_time,
        DataType.STRING: validate_string,
        DataType.MULTILINE_STRING: validate_multiline_string,
        DataType.INTL_STRING: validate_intl_string,
        DataType.INTL_MULTILINE_STRING: validate_intl_multiline_string,
        DataType.ENUMERATION: validate_enumeration,
        DataType.ENUMERATED_STRING: validate_enumerated_string,
    }
)


def get_validator(type_name: Union[DataType, str]) -> TypeValidator:
    """Look up the validator for a data type.

    Args:
        type_name: A DataType member or its name (e.g. "PositiveInteger").

    Raises:
        UnknownDataTypeError: If no validator is registered for the name.
    """
    try:
        return TYPE_VALIDATORS[DataType(type_name)]
    except (ValueError, KeyError):
        raise UnknownDataTypeError(str(type_name)) from None


def validate_value(
    value: str,
    field: Field,
    ctx: Optional[ValidationContext] = None,
    registry: Optional[SpecRegistry] = None,
) -> ValidityResult:
    """Validate ``value`` against explicit field metadata."""
    validator = get_validator(field.type)
    return validator(value, field, ctx or empty_context(), registry)


def validate_field(
    name: str,
    value: str,
    ctx: Optional[ValidationContext] = None,
    registry: Optional[SpecRegistry] = None,
) -> ValidityResult:
    """Validate ``value`` for the field called ``name``.

    Raises:
        UnknownFieldError: If ``name`` is not in the field table.

    Examples:
        >>> validate_field("QSO_DATE", "20000229").is_valid
        True
        >>> validate_field("STATE", "YT", mapping_context({"DXCC": "123"})).validity
        <Validity.INVALID_WARNING: 1>
    """
    registry = registry or default_registry()
    return validate_value(value, registry.field(name), ctx, registry)


def validate_record(
    record: Mapping[str, Any],
    registry: Optional[SpecRegistry] = None,
    record_number: int = 0,
) -> List[FieldIssue]:
    """Validate every field of one record, using the record as context.

    Application-defined and unknown (user-defined) fields are skipped. Header
    fields and import-only fields are reported as warnings.

    Returns:
        Issues for fields that are not valid, in record field order.
    """
    registry = registry or default_registry()
    ctx = mapping_context(record)
    issues: List[FieldIssue] = []
    for key, cell in record.items():
        name = normalize_field_name(str(key))
        value = raw_value(cell)
        if name.startswith(APP_FIELD_PREFIX):
            logger.debug("Record %d: skipping application field %s", record_number, name)
            continue
        if not registry.has_field(name):
            logger.debug("Record %d: skipping unknown field %s", record_number, name)
            continue
        if value == "":
            continue
        field = registry.field(name)
        if field.header_only:
            issues.append(
                FieldIssue(
                    record_number,
                    name,
                    value,
                    ValidityResult(
                        get_severity("record", "header_field_in_record"),
                        f"{name} is a header field and does not belong in a record",
                    ),
                )
            )
            continue
        if field.import_only:
            issues.append(
                FieldIssue(
                    record_number,
                    name,
                    value,
                    ValidityResult(
                        get_severity("record", "import_only_field"),
                        f"{name} is import-only and should not be written to new logs",
                    ),
                )
            )
        result = validate_value(value, field, ctx, registry)
        if not result.is_valid:
            issues.append(FieldIssue(record_number, name, value, result))
    return issues


def load_records(path: Path) -> pd.DataFrame:
    """Read a CSV log (one row per record, one column per field) as strings.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed as CSV.
    """
    if not path.exists():
        raise FileNotFoundError(f"Log file not found: {path}")
    try:
        return pd.read_csv(path, dtype=str, keep_default_na=False, encoding="utf-8-sig")
    except pd.errors.EmptyDataError:
        return pd.DataFrame()
    except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
        raise ValueError(f"Failed to read CSV file {path}: {e}") from e


def run_validation(
    records: pd.DataFrame,
    source_name: str = "",
    source_path: Optional[Path] = None,
    registry: Optional[SpecRegistry] = None,
) -> ValidationReport:
    """Validate every record in a table.

    Args:
        records: One row per record, one column per field. Empty strings and
            NaN mean the field is absent from that record.
        source_name: Name shown in the report.
        source_path: Path the records were read from, if any.
        registry: Tables to validate against (packaged tables by default).

    Returns:
        ValidationReport with every warning and error found.

    Examples:
        >>> df = load_records(Path("logs/field_day.csv"))
        >>> report = run_validation(df, source_name="field_day.csv")
        >>> print(report.summary())
    """
    registry = registry or default_registry()
    issues: List[FieldIssue] = []
    for number, row in enumerate(records.to_dict(orient="records"), start=1):
        issues.extend(validate_record(row, registry, record_number=number))
    return ValidationReport(
        issues=issues,
        record_count=len(records),
        source_name=source_name or (source_path.name if source_path else ""),
        source_path=source_path,
    )


def print_report(report: ValidationReport) -> None:
    """Print validation report to console.

    Displays a summary followed by every issue found.

    Examples:
        >>> print_report(report)
        Validation Summary:
          Source: field_day.csv
          Records: 2 validated (1 with issues)
          Issues: 1 errors, 0 warnings

        Issues:
        ❌ record 2 QSO_DATE (error): QSO_DATE value 20220431 is not a calendar date
    """
    print(report.to_console_summary())
