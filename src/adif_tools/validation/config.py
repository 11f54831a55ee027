"""Validation configuration constants.

This module centralizes the constants and severity rules of the validation
engine. Severity is fixed per validator and per outcome; validators look it up
here rather than hard-coding it.

Severity Levels:
    - INVALID_ERROR: Value structurally violates its data type or closed vocabulary
    - INVALID_WARNING: Value is suspicious or unverifiable but plausibly intentional
"""

from __future__ import annotations

from adif_tools.core.enums import Validity

# ============================================================================
# DATA TYPE CONSTANTS
# ============================================================================

# ADIF dates start at the beginning of 1930
DATE_EPOCH_YEAR = 1930

# Positive integers have an implicit minimum even when the table declares none
POSITIVE_INTEGER_MIN = 1

# Characters allowed in String fields: printable ASCII
ASCII_PRINTABLE_MIN = " "
ASCII_PRINTABLE_MAX = "~"

# Line separators additionally allowed in MultilineString fields
LINE_SEPARATORS = frozenset("\r\n")


# ============================================================================
# ENUMERATION CONSTANTS
# ============================================================================

BAND_ENUMERATION = "Band"
BAND_UNITS = ("mm", "cm", "m")

CONTEST_ID_ENUMERATION = "Contest_ID"
# Word separators treated as equivalent when matching contest identifiers
CONTEST_ID_SEPARATORS = ("-", "_", " ")
CONTEST_ID_CANONICAL_SEPARATOR = "-"

# Application-defined fields are never validated against the tables
APP_FIELD_PREFIX = "APP_"


# ============================================================================
# SEVERITY RULES
# ============================================================================
# Format: {validator_id: {outcome: severity}}

# Closed vocabulary: an unrecognized value is structurally wrong
ENUMERATION_SEVERITY = {
    "unknown_value": Validity.INVALID_ERROR,
}

# Closed vocabulary scoped by another field
ENUM_SCOPE_SEVERITY = {
    "unknown_value": Validity.INVALID_ERROR,
    "scope_mismatch": Validity.INVALID_WARNING,
}

# Free text with a soft vocabulary hint (e.g. SUBMODE scoped by MODE)
STRING_ENUM_SCOPE_SEVERITY = {
    "unknown_value": Validity.INVALID_WARNING,
    "scope_mismatch": Validity.INVALID_WARNING,
}

# User-invented contest identifiers are allowed
CONTEST_ID_SEVERITY = {
    "separator_mismatch": Validity.INVALID_WARNING,
    "unknown_value": Validity.INVALID_WARNING,
}

# Record-level placement rules
RECORD_SEVERITY = {
    "header_field_in_record": Validity.INVALID_WARNING,
    "import_only_field": Validity.INVALID_WARNING,
}


_SEVERITY_MAP = {
    "enumeration": ENUMERATION_SEVERITY,
    "enum_scope": ENUM_SCOPE_SEVERITY,
    "string_enum_scope": STRING_ENUM_SCOPE_SEVERITY,
    "contest_id": CONTEST_ID_SEVERITY,
    "record": RECORD_SEVERITY,
}


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_severity(validator_id: str, outcome: str) -> Validity:
    """Get the severity assigned to a validator outcome.

    Args:
        validator_id: Validator identifier (e.g., "enum_scope").
        outcome: Outcome name (e.g., "scope_mismatch").

    Returns:
        Validity.INVALID_ERROR or Validity.INVALID_WARNING.

    Raises:
        ValueError: If validator_id or outcome is unknown.

    Examples:
        >>> get_severity("enum_scope", "unknown_value")
        <Validity.INVALID_ERROR: 2>
        >>> get_severity("string_enum_scope", "unknown_value")
        <Validity.INVALID_WARNING: 1>
    """
    if validator_id not in _SEVERITY_MAP:
        raise ValueError(f"Unknown validator_id: {validator_id}")

    severity_config = _SEVERITY_MAP[validator_id]

    if outcome not in severity_config:
        raise ValueError(
            f"Invalid outcome '{outcome}' for validator '{validator_id}'. "
            f"Valid outcomes: {list(severity_config.keys())}"
        )

    return severity_config[outcome]
