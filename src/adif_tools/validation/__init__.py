"""Field validation engine for ADIF logs.

This module provides the validation framework for contact log fields:

- **Models**: ValidityResult, FieldIssue, ValidationReport - validation result data structures
- **Validators**: One pure function per data type (see validation/validators/)
- **Context**: ValidationContext - how validators read other fields of the record
- **Config**: Constants and severity rules (import from .config)
- **Registry**: TYPE_VALIDATORS, validate_field(), run_validation() - dispatch and orchestration

Public API:
    ValidityResult: Result of validating one value (validity + message)
    validate_field: Validate a value for a named field
    validate_record: Validate every field of a record
    run_validation: Validate a table of records
    print_report: Display validation results to console

Usage:
    >>> from adif_tools.validation import validate_field, mapping_context
    >>> validate_field("STATE", "YT", mapping_context({"DXCC": "1"})).is_valid
    True
"""

from __future__ import annotations

from adif_tools.core.enums import DataType, Validity

from .context import ValidationContext, empty_context, mapping_context
from .models import FieldIssue, ValidationReport, ValidityResult
from .registry import (
    TYPE_VALIDATORS,
    get_validator,
    load_records,
    print_report,
    run_validation,
    validate_field,
    validate_record,
    validate_value,
)

__all__ = [
    # Data models
    "ValidityResult",
    "FieldIssue",
    "ValidationReport",
    # Context
    "ValidationContext",
    "empty_context",
    "mapping_context",
    # Dispatch and runner functions
    "TYPE_VALIDATORS",
    "get_validator",
    "validate_value",
    "validate_field",
    "validate_record",
    "load_records",
    "run_validation",
    "print_report",
    # Enums
    "DataType",
    "Validity",
]
