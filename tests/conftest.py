"""Shared pytest configuration, fixtures, and helpers for ADIF validation tests."""

from pathlib import Path
from typing import Dict, Optional

import pandas as pd
import pytest
import yaml

from adif_tools.core.enums import Validity
from adif_tools.spec import SpecRegistry, default_registry
from adif_tools.validation import mapping_context, validate_field


def validity_of(field: str, value: str, values: Optional[Dict[str, str]] = None) -> Validity:
    """Validate ``value`` for ``field`` with the other record fields in ``values``."""
    return validate_field(field, value, mapping_context(values or {})).validity


def write_tables(directory: Path, fields: list, enumerations: list) -> SpecRegistry:
    """Write field and enumeration tables as YAML and load them."""
    fields_file = directory / "fields.yaml"
    enumerations_file = directory / "enumerations.yaml"
    fields_file.write_text(
        yaml.safe_dump({"adif_version": "9.9.9", "fields": fields}), encoding="utf-8"
    )
    enumerations_file.write_text(
        yaml.safe_dump({"enumerations": enumerations}), encoding="utf-8"
    )
    return SpecRegistry(fields_file, enumerations_file)


@pytest.fixture
def tables() -> SpecRegistry:
    """The packaged ADIF tables."""
    return default_registry()


@pytest.fixture
def sample_log() -> pd.DataFrame:
    """Three records: one clean, one with an error, one with a warning."""
    return pd.DataFrame(
        {
            "CALL": ["W1AW", "JA1XYZ", "VE7ABC"],
            "QSO_DATE": ["20230624", "20220431", "20230625"],
            "TIME_ON": ["1805", "0030", "235959"],
            "BAND": ["20m", "40m", "2m"],
            "MODE": ["SSB", "CW", "FM"],
            "SUBMODE": ["USB", "", ""],
            "DXCC": ["291", "339", "1"],
            "STATE": ["CA", "09", "BC"],
            "CONTEST_ID": ["ARRL-FD", "", "ARRL_FD"],
        }
    )
