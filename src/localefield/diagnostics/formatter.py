"""Diagnostic and report formatting service.

Centralizes output formatting for configuration diagnostics and translation
audit reports, with configurable output styles.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from localefield.constants import MAX_REPORT_MESSAGE_LENGTH

from .codes import Diagnostic

if TYPE_CHECKING:
    from .report import Issue, Stats

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects (configuration errors) and Stats objects
    (audit reports) into human-readable or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages to prevent leaking long content values
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> print(formatter.format(ErrorTemplate.duplicate_locale("en")))
        error[DUPLICATE_LOCALE]: Locale 'en' appears more than once
          = locale: en
          = help: Remove the repeated entry from the locale set

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.duplicate_locale("en")))
        DUPLICATE_LOCALE: Locale 'en' appears more than once
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = MAX_REPORT_MESSAGE_LENGTH

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_stats(self, stats: "Stats") -> str:
        """Format an audit report with summary line and grouped issues.

        Issues are grouped by severity (error, warning, info). JSON output
        emits one object with the counters and the full issue list.

        Args:
            stats: Stats returned by audit_record()

        Returns:
            Formatted report string
        """
        if self.output_format is OutputFormat.JSON:
            return self._format_stats_json(stats)

        parts: list[str] = [
            f"Translation completion: {stats.completion_percent:.1f}% "
            f"({stats.translated_field_slots}/{stats.total_field_slots} slots), "
            f"{stats.error_count} error(s), {stats.warning_count} warning(s), "
            f"{stats.info_count} info"
        ]

        for severity, issues in stats.issues_by_severity().items():
            if not issues:
                continue
            parts.append(f"\n{severity.capitalize()}s ({len(issues)}):")
            for issue in issues:
                parts.append(f"  {self.format_issue(issue)}")

        return "\n".join(parts)

    def format_issue(self, issue: "Issue") -> str:
        """Format one audit issue as a single line.

        Example output:
            [warning] empty title@en: "title" is not translated in en (help: ...)
        """
        severity = str(issue.severity)
        if self.color:
            severity = self._paint(severity)
        line = f"[{severity}] {issue.kind} {issue.field}@{issue.locale}: "
        line += self._maybe_sanitize(issue.message)
        if issue.suggestion:
            line += f" (help: {self._maybe_sanitize(issue.suggestion)})"
        return line

    def _format_stats_json(self, stats: "Stats") -> str:
        data = {
            "total_field_slots": stats.total_field_slots,
            "translated_field_slots": stats.translated_field_slots,
            "completion_rate": stats.completion_rate,
            "error_count": stats.error_count,
            "warning_count": stats.warning_count,
            "info_count": stats.info_count,
            "issues": [
                {
                    "kind": str(issue.kind),
                    "field": issue.field,
                    "locale": issue.locale,
                    "severity": str(issue.severity),
                    "message": self._maybe_sanitize(issue.message),
                    "suggestion": (
                        self._maybe_sanitize(issue.suggestion) if issue.suggestion else None
                    ),
                }
                for issue in stats.issues
            ],
        }
        return json.dumps(data, ensure_ascii=False)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[INVALID_RULE]: Invalid validation rule for field 'title': ...
              = field: title
              = help: Fix the rule configuration; ...
        """
        severity = diagnostic.severity
        severity_str = self._paint(severity) if self.color else severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {diagnostic.message}"]

        if diagnostic.locale_code:
            parts.append(f"  = locale: {diagnostic.locale_code}")

        if diagnostic.field_name:
            parts.append(f"  = field: {diagnostic.field_name}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._maybe_sanitize(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            DUPLICATE_LOCALE: Locale 'en' appears more than once
        """
        message = self._maybe_sanitize(diagnostic.message)
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "DUPLICATE_LOCALE", "code_value": 1004, "message": "...", ...}
        """
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.locale_code:
            data["locale_code"] = diagnostic.locale_code

        if diagnostic.field_name:
            data["field_name"] = diagnostic.field_name

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _paint(severity: str) -> str:
        match severity:
            case "error":
                return f"\033[1;31m{severity}\033[0m"  # Bold red
            case "warning":
                return f"\033[1;33m{severity}\033[0m"  # Bold yellow
            case _:
                return f"\033[1;36m{severity}\033[0m"  # Bold cyan

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
