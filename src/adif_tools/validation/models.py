"""Validation data models.

This module defines core data structures for validation results:
- ValidityResult: Outcome of validating a single field value
- FieldIssue: A non-valid result located in a specific record and field
- ValidationReport: Aggregated issues from validating a whole log
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from adif_tools.core.enums import Validity


@dataclass(frozen=True)
class ValidityResult:
    """Result of validating one field value.

    Attributes:
        validity: VALID, INVALID_WARNING or INVALID_ERROR.
        message: Human-readable explanation; empty if and only if valid.

    Examples:
        >>> ValidityResult.error("QSO_DATE value 19000101 is before 1930")
        ValidityResult(validity=<Validity.INVALID_ERROR: 2>, message='QSO_DATE value 19000101 is before 1930')
        >>> ValidityResult.valid().is_valid
        True
    """

    validity: Validity
    message: str = ""

    def __post_init__(self) -> None:
        """Validate the message/validity invariant."""
        if self.validity == Validity.VALID and self.message:
            raise ValueError("Valid results must not carry a message")
        if self.validity != Validity.VALID and not self.message:
            raise ValueError(f"{self.validity.label} results require a message")

    @classmethod
    def valid(cls) -> "ValidityResult":
        return _VALID

    @classmethod
    def warning(cls, message: str) -> "ValidityResult":
        return cls(Validity.INVALID_WARNING, message)

    @classmethod
    def error(cls, message: str) -> "ValidityResult":
        return cls(Validity.INVALID_ERROR, message)

    @property
    def is_valid(self) -> bool:
        return self.validity == Validity.VALID


_VALID = ValidityResult(Validity.VALID)


@dataclass(frozen=True)
class FieldIssue:
    """A warning or error found in one field of one record.

    Attributes:
        record_number: 1-based position of the record in the log.
        field: Upper-case field name.
        value: Raw value that was validated.
        result: The non-valid result.
    """

    record_number: int
    field: str
    value: str
    result: ValidityResult

    @property
    def validity(self) -> Validity:
        return self.result.validity

    @property
    def message(self) -> str:
        return self.result.message

    def to_dict(self) -> dict:
        return {
            "record": self.record_number,
            "field": self.field,
            "value": self.value,
            "severity": self.validity.label,
            "message": self.message,
        }


@dataclass
class ValidationReport:
    """Aggregated validation results for a log.

    Attributes:
        issues: Every warning and error found, in record order.
        record_count: Number of records validated.
        source_name: Display name of the validated log (usually a file name).
        source_path: Path of the validated log file, if it came from disk.

    Examples:
        >>> report = run_validation(df, source_name="field_day.csv")
        >>> report.has_errors()
        True
        >>> report.get_error_count()
        2
    """

    issues: List[FieldIssue] = field(default_factory=list)
    record_count: int = 0
    source_name: str = ""
    source_path: Optional[Path] = None

    def has_errors(self, strict: bool = False) -> bool:
        """Check if validation failed.

        Args:
            strict: If True, treat warnings as errors. Default False.

        Returns:
            True if any errors found (or warnings in strict mode), False otherwise.
        """
        threshold = Validity.INVALID_WARNING if strict else Validity.INVALID_ERROR
        return any(issue.validity >= threshold for issue in self.issues)

    def get_error_count(self) -> int:
        """Count error-level issues."""
        return sum(1 for i in self.issues if i.validity == Validity.INVALID_ERROR)

    def get_warning_count(self) -> int:
        """Count warning-level issues."""
        return sum(1 for i in self.issues if i.validity == Validity.INVALID_WARNING)

    def get_issues(self, validity: Optional[Validity] = None) -> List[FieldIssue]:
        """Get all issues, optionally filtered by validity level.

        Examples:
            >>> errors = report.get_issues(Validity.INVALID_ERROR)
            >>> everything = report.get_issues()
        """
        return [i for i in self.issues if validity is None or i.validity == validity]

    def records_with_issues(self) -> int:
        """Count distinct records that produced at least one issue."""
        return len({i.record_number for i in self.issues})

    def summary(self) -> str:
        """Generate a concise text summary of validation results.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Source: field_day.csv
              Records: 120 validated (3 with issues)
              Issues: 2 errors, 1 warnings
        """
        return (
            f"Validation Summary:\n"
            f"  Source: {self.source_name}\n"
            f"  Records: {self.record_count} validated "
            f"({self.records_with_issues()} with issues)\n"
            f"  Issues: {self.get_error_count()} errors, {self.get_warning_count()} warnings"
        )

    def to_markdown(self) -> str:
        """Generate a detailed Markdown validation report.

        Returns:
            Markdown with a header, summary counts, and one table per severity
            listing record number, field, value and message.
        """
        from datetime import datetime

        errors = self.get_issues(Validity.INVALID_ERROR)
        warnings = self.get_issues(Validity.INVALID_WARNING)

        lines = [
            f"# Validation Report: {self.source_name}",
            "",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Records:** {self.record_count}",
            f"- **Records With Issues:** {self.records_with_issues()}",
            f"- **Errors:** {len(errors)} ❌" if errors else f"- **Errors:** {len(errors)}",
            f"- **Warnings:** {len(warnings)} ⚠️" if warnings else f"- **Warnings:** {len(warnings)}",
            "",
        ]

        if not errors and not warnings:
            lines.append("## ✅ All Fields Valid")
            lines.append("")
            lines.append("No validation issues found.")
            lines.append("")
            return "\n".join(lines)

        for title, group in (("## ❌ Errors", errors), ("## ⚠️ Warnings", warnings)):
            if not group:
                continue
            lines.append(title)
            lines.append("")
            lines.append("| Record | Field | Value | Message |")
            lines.append("|---:|---|---|---|")
            for issue in group:
                lines.append(
                    f"| {issue.record_number} | {issue.field} | "
                    f"{_md_cell(issue.value)} | {_md_cell(issue.message)} |"
                )
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a detailed JSON validation report."""
        import json
        from datetime import datetime

        report_data = {
            "metadata": {
                "source": self.source_name,
                "path": str(self.source_path) if self.source_path else None,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": {
                "records": self.record_count,
                "records_with_issues": self.records_with_issues(),
                "errors": self.get_error_count(),
                "warnings": self.get_warning_count(),
            },
            "errors": [i.to_dict() for i in self.get_issues(Validity.INVALID_ERROR)],
            "warnings": [i.to_dict() for i in self.get_issues(Validity.INVALID_WARNING)],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_console_summary(self) -> str:
        """Generate the summary plus one line per issue for console output."""
        lines = [self.summary(), ""]

        if not self.issues:
            lines.append("✅ All fields valid!")
        else:
            lines.append("Issues:")
            for issue in self.issues:
                icon = "❌" if issue.validity == Validity.INVALID_ERROR else "⚠️"
                lines.append(
                    f"{icon} record {issue.record_number} {issue.field} "
                    f"({issue.validity.label}): {issue.message}"
                )

        return "\n".join(lines)


def _md_cell(text: str) -> str:
    """Escape a value for a Markdown table cell."""
    return (
        text.replace("|", "\\|").replace("\r", "\\r").replace("\n", "\\n") if text else "(empty)"
    )
