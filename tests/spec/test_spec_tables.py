"""Tests for loading the field and enumeration tables."""

from decimal import Decimal

import pytest

from conftest import write_tables

from adif_tools.core.enums import DataType
from adif_tools.core.errors import (
    SpecConfigurationError,
    UnknownDataTypeError,
    UnknownEnumerationError,
    UnknownFieldError,
)
from adif_tools.spec import SpecRegistry

MODES = {
    "name": "Mode",
    "properties": ["Description"],
    "values": [{"value": "SSB"}, {"value": "FM"}],
}
SUBMODES = {
    "name": "Submode",
    "properties": ["Mode"],
    "scope_property": "Mode",
    "values": [{"value": "USB", "Mode": "SSB"}, {"value": "LSB", "Mode": "SSB"}],
}


class TestPackagedTables:
    def test_metadata(self, tables):
        assert tables.adif_version == "3.1.4"
        assert tables.spec_url.startswith("https://adif.org/")

    def test_field_lookup(self, tables):
        field = tables.field("cqz")
        assert field.type == DataType.POSITIVE_INTEGER
        assert field.min_value == Decimal("1")
        assert field.max_value == Decimal("40")

    def test_scoped_fields(self, tables):
        assert tables.field("STATE").enumeration_scope_field == "DXCC"
        assert tables.field("MY_STATE").enumeration_scope_field == "MY_DXCC"
        assert tables.field("SUBMODE").enumeration_scope_field == "MODE"

    def test_every_binding_resolves(self, tables):
        for field in tables.fields().values():
            if field.enumeration_name:
                assert tables.enumeration(field.enumeration_name).values, field.name

    def test_scope_properties(self, tables):
        assert tables.enumeration("Primary_Administrative_Subdivision").scope_property == (
            "DXCC Entity Code"
        )
        assert tables.enumeration("Submode").scope_property == "Mode"

    def test_unknown_names(self, tables):
        with pytest.raises(UnknownFieldError):
            tables.field("NOPE")
        with pytest.raises(UnknownEnumerationError, match="Unknown enumeration: Nope"):
            tables.enumeration("Nope")
        assert not tables.has_field("NOPE")
        assert tables.has_field("call")

    def test_tables_are_read_only(self, tables):
        with pytest.raises(TypeError):
            tables.fields()["NEW"] = tables.field("CALL")


class TestLoadingCustomTables:
    def test_minimal_tables(self, tmp_path):
        registry = write_tables(
            tmp_path,
            [
                {"name": "mode", "type": "Enumeration", "enumeration": "Mode"},
                {"name": "SUBMODE", "type": "EnumeratedString", "enumeration": "Submode",
                 "scope": "mode"},
            ],
            [MODES, SUBMODES],
        )
        assert registry.adif_version == "9.9.9"
        assert set(registry.fields()) == {"MODE", "SUBMODE"}
        assert registry.field("SUBMODE").enumeration_scope_field == "MODE"
        assert registry.enumeration("Submode").values[0].property("Mode") == "SSB"

    def test_unknown_data_type(self, tmp_path):
        with pytest.raises(UnknownDataTypeError, match="Location"):
            write_tables(tmp_path, [{"name": "GRID", "type": "Location"}], [])

    def test_unknown_enumeration_binding(self, tmp_path):
        with pytest.raises(SpecConfigurationError, match="unknown enumeration Band"):
            write_tables(
                tmp_path, [{"name": "BAND", "type": "Enumeration", "enumeration": "Band"}], []
            )

    def test_scope_without_scope_property(self, tmp_path):
        with pytest.raises(SpecConfigurationError, match="declares no scope property"):
            write_tables(
                tmp_path,
                [
                    {"name": "MODE", "type": "String"},
                    {"name": "X", "type": "Enumeration", "enumeration": "Mode", "scope": "MODE"},
                ],
                [MODES],
            )

    def test_scope_field_must_exist(self, tmp_path):
        with pytest.raises(SpecConfigurationError, match="unknown field MODE"):
            write_tables(
                tmp_path,
                [{"name": "SUBMODE", "type": "EnumeratedString", "enumeration": "Submode",
                  "scope": "MODE"}],
                [SUBMODES],
            )

    def test_scope_property_must_be_declared(self, tmp_path):
        broken = dict(SUBMODES, scope_property="Band")
        with pytest.raises(SpecConfigurationError, match="scope property 'Band'"):
            write_tables(tmp_path, [], [broken])

    def test_undeclared_value_property(self, tmp_path):
        broken = dict(MODES, values=[{"value": "SSB", "Color": "blue"}])
        with pytest.raises(SpecConfigurationError, match="undeclared properties"):
            write_tables(tmp_path, [], [broken])

    def test_duplicate_field(self, tmp_path):
        with pytest.raises(SpecConfigurationError, match="Duplicate field CALL"):
            write_tables(
                tmp_path,
                [{"name": "CALL", "type": "String"}, {"name": "call", "type": "String"}],
                [],
            )

    def test_duplicate_enumeration(self, tmp_path):
        with pytest.raises(SpecConfigurationError, match="Duplicate enumeration Mode"):
            write_tables(tmp_path, [], [MODES, MODES])

    @pytest.mark.parametrize("type_name", ["Enumeration", "EnumeratedString"])
    def test_bound_type_requires_enumeration(self, tmp_path, type_name):
        with pytest.raises(SpecConfigurationError, match="binds no enumeration"):
            write_tables(tmp_path, [{"name": "MODE", "type": type_name}], [])

    def test_min_above_max(self, tmp_path):
        with pytest.raises(SpecConfigurationError, match="exceeds maximum"):
            write_tables(tmp_path, [{"name": "AGE", "type": "Number", "min": 10, "max": 1}], [])

    def test_non_numeric_bound(self, tmp_path):
        with pytest.raises(SpecConfigurationError, match="is not a number"):
            write_tables(tmp_path, [{"name": "AGE", "type": "Number", "min": "old"}], [])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SpecRegistry(tmp_path / "fields.yaml", tmp_path / "enumerations.yaml")

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / "fields.yaml").write_text("fields: [unclosed", encoding="utf-8")
        (tmp_path / "enumerations.yaml").write_text("enumerations: []", encoding="utf-8")
        with pytest.raises(SpecConfigurationError, match="Could not parse"):
            SpecRegistry(tmp_path / "fields.yaml", tmp_path / "enumerations.yaml")

    def test_top_level_must_be_mapping(self, tmp_path):
        (tmp_path / "fields.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        (tmp_path / "enumerations.yaml").write_text("enumerations: []", encoding="utf-8")
        with pytest.raises(SpecConfigurationError, match="expected a mapping"):
            SpecRegistry(tmp_path / "fields.yaml", tmp_path / "enumerations.yaml")
