"""Tests for validation result models and report generation."""

import json
from pathlib import Path

import pytest

from adif_tools.core.enums import Validity
from adif_tools.validation.models import FieldIssue, ValidationReport, ValidityResult


class TestValidityResult:
    def test_valid_has_no_message(self):
        result = ValidityResult.valid()
        assert result.validity == Validity.VALID
        assert result.message == ""
        assert result.is_valid

    def test_warning_and_error(self):
        assert ValidityResult.warning("w").validity == Validity.INVALID_WARNING
        assert ValidityResult.error("e").validity == Validity.INVALID_ERROR
        assert not ValidityResult.error("e").is_valid

    def test_valid_with_message_rejected(self):
        with pytest.raises(ValueError, match="must not carry a message"):
            ValidityResult(Validity.VALID, "looks fine")

    @pytest.mark.parametrize("validity", [Validity.INVALID_WARNING, Validity.INVALID_ERROR])
    def test_invalid_without_message_rejected(self, validity):
        with pytest.raises(ValueError, match="require a message"):
            ValidityResult(validity)

    def test_validity_is_ordered_by_severity(self):
        assert Validity.VALID < Validity.INVALID_WARNING < Validity.INVALID_ERROR
        assert max(Validity.INVALID_WARNING, Validity.VALID) == Validity.INVALID_WARNING
        assert str(Validity.INVALID_ERROR) == "error"


@pytest.fixture
def mock_issues():
    return [
        FieldIssue(2, "QSO_DATE", "20220431", ValidityResult.error(
            "QSO_DATE value 20220431 is not a calendar date")),
        FieldIssue(2, "TIME_ON", "2400", ValidityResult.error(
            "TIME_ON value 2400 is not a time of day")),
        FieldIssue(3, "CONTEST_ID", "ARRL_FD", ValidityResult.warning(
            "CONTEST_ID value 'ARRL_FD' should be written 'ARRL-FD'")),
    ]


@pytest.fixture
def mock_validation_report(mock_issues):
    return ValidationReport(
        issues=mock_issues,
        record_count=5,
        source_name="field_day.csv",
        source_path=Path("logs/field_day.csv"),
    )


@pytest.fixture
def mock_validation_report_clean():
    return ValidationReport(issues=[], record_count=4, source_name="contest.csv")


class TestValidationReport:
    def test_counts(self, mock_validation_report):
        assert mock_validation_report.get_error_count() == 2
        assert mock_validation_report.get_warning_count() == 1
        assert mock_validation_report.records_with_issues() == 2

    def test_has_errors(self, mock_validation_report, mock_validation_report_clean):
        assert mock_validation_report.has_errors()
        assert not mock_validation_report_clean.has_errors()
        assert not mock_validation_report_clean.has_errors(strict=True)

    def test_strict_treats_warnings_as_errors(self):
        report = ValidationReport(
            issues=[FieldIssue(1, "SUBMODE", "usb", ValidityResult.warning("hint"))],
            record_count=1,
        )
        assert not report.has_errors()
        assert report.has_errors(strict=True)

    def test_get_issues_filter(self, mock_validation_report):
        errors = mock_validation_report.get_issues(Validity.INVALID_ERROR)
        assert [i.field for i in errors] == ["QSO_DATE", "TIME_ON"]
        assert len(mock_validation_report.get_issues()) == 3

    def test_summary(self, mock_validation_report):
        assert mock_validation_report.summary() == (
            "Validation Summary:\n"
            "  Source: field_day.csv\n"
            "  Records: 5 validated (2 with issues)\n"
            "  Issues: 2 errors, 1 warnings"
        )

    def test_to_markdown(self, mock_validation_report):
        md = mock_validation_report.to_markdown()
        assert md.startswith("# Validation Report: field_day.csv")
        assert "## Summary" in md
        assert "- **Errors:** 2 ❌" in md
        assert "- **Warnings:** 1 ⚠️" in md
        assert "## ❌ Errors" in md
        assert "## ⚠️ Warnings" in md
        assert "| 2 | QSO_DATE | 20220431 | QSO_DATE value 20220431 is not a calendar date |" in md
        assert md.index("## ❌ Errors") < md.index("## ⚠️ Warnings")

    def test_to_markdown_clean(self, mock_validation_report_clean):
        md = mock_validation_report_clean.to_markdown()
        assert "## ✅ All Fields Valid" in md
        assert "## ❌ Errors" not in md

    def test_to_markdown_escapes_cells(self):
        report = ValidationReport(
            issues=[FieldIssue(1, "CALL", "A|B\n", ValidityResult.error("bad"))],
            record_count=1,
        )
        assert "| A\\|B\\n |" in report.to_markdown()

    def test_to_json(self, mock_validation_report):
        data = json.loads(mock_validation_report.to_json())
        assert data["metadata"]["source"] == "field_day.csv"
        assert data["metadata"]["path"] == str(Path("logs/field_day.csv"))
        assert data["summary"] == {
            "records": 5,
            "records_with_issues": 2,
            "errors": 2,
            "warnings": 1,
        }
        assert data["errors"][0] == {
            "record": 2,
            "field": "QSO_DATE",
            "value": "20220431",
            "severity": "error",
            "message": "QSO_DATE value 20220431 is not a calendar date",
        }
        assert data["warnings"][0]["severity"] == "warning"

    def test_to_console_summary(self, mock_validation_report, mock_validation_report_clean):
        text = mock_validation_report.to_console_summary()
        assert "Issues:" in text
        assert "❌ record 2 QSO_DATE (error): QSO_DATE value 20220431" in text
        assert "⚠️ record 3 CONTEST_ID (warning)" in text
        assert "✅ All fields valid!" in mock_validation_report_clean.to_console_summary()
