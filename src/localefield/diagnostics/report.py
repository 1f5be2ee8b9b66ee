"""Translation audit result types.

Issue is a single detected translation defect; Stats is the aggregate result
of auditing one content record. Both are immutable and created fresh for
every invocation.

Python 3.13+.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from localefield.enums import IssueKind, Severity
from localefield.types import FieldName, LocaleCode

__all__ = [
    "Issue",
    "IssueKey",
    "LocaleCompletion",
    "Stats",
]

IssueKey: TypeAlias = tuple[IssueKind, FieldName, LocaleCode]
"""Deduplication key: two issues with equal keys are the same issue."""


# ============================================================================
# ISSUE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Issue:
    """Structured translation defect for one (field, locale) slot.

    Attributes:
        kind: What is wrong (missing, empty, length_mismatch, ...)
        field: Name of the content field
        locale: Locale the defect was found in
        severity: error, warning, or info
        message: Human-readable description
        suggestion: Optional hint for the editor
    """

    kind: IssueKind
    field: FieldName
    locale: LocaleCode
    severity: Severity
    message: str
    suggestion: str | None = None

    @property
    def key(self) -> IssueKey:
        """Deduplication key ``(kind, field, locale)``.

        Message and suggestion text are not part of the key.
        """
        return (self.kind, self.field, self.locale)

    def format(self) -> str:
        """Format issue as a single human-readable line.

        Delegates to DiagnosticFormatter for consistent output.

        Example:
            >>> Issue(IssueKind.EMPTY, "title", "en", Severity.WARNING,
            ...       '"title" is not translated in en').format()
            '[warning] empty title@en: "title" is not translated in en'
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format_issue(self)


# ============================================================================
# LOCALE COMPLETION
# ============================================================================


@dataclass(frozen=True, slots=True)
class LocaleCompletion:
    """Share of a record's fields translated into one locale.

    Attributes:
        locale: Locale code
        rate: Non-empty fields divided by total fields (0.0 to 1.0)
    """

    locale: LocaleCode
    rate: float


# ============================================================================
# STATS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Stats:
    """Aggregate translation statistics for one content record.

    Immutable result object; safe to hand to concurrent report renderers.

    Attributes:
        total_field_slots: Number of fields times number of locales
        translated_field_slots: Slots holding a non-empty value
        completion_rate: translated / total (0.0 when there are no slots)
        issues: Deduplicated issues in order of first occurrence

    Example:
        >>> stats = Stats(total_field_slots=3, translated_field_slots=1,
        ...               completion_rate=1 / 3, issues=())
        >>> stats.has_errors
        False
        >>> round(stats.completion_percent, 1)
        33.3
    """

    total_field_slots: int
    translated_field_slots: int
    completion_rate: float
    issues: tuple[Issue, ...]

    @property
    def completion_percent(self) -> float:
        """Completion rate scaled to 0-100."""
        return self.completion_rate * 100

    @property
    def error_count(self) -> int:
        """Number of error-severity issues."""
        return sum(1 for issue in self.issues if issue.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of warning-severity issues."""
        return sum(1 for issue in self.issues if issue.severity is Severity.WARNING)

    @property
    def info_count(self) -> int:
        """Number of info-severity issues."""
        return sum(1 for issue in self.issues if issue.severity is Severity.INFO)

    @property
    def has_errors(self) -> bool:
        """Check if any error-severity issue was found.

        Warnings and infos do not make a record invalid.
        """
        return self.error_count > 0

    def issues_by_severity(self) -> dict[Severity, tuple[Issue, ...]]:
        """Group issues by severity.

        Every Severity member is present as a key, in declaration order
        (error, warning, info); issue order within a group is preserved.
        """
        return {
            severity: tuple(issue for issue in self.issues if issue.severity is severity)
            for severity in Severity
        }

    def issues_by_locale(
        self, locales: Iterable[LocaleCode] = ()
    ) -> dict[LocaleCode, tuple[Issue, ...]]:
        """Group issues by locale.

        Args:
            locales: Locale order for the result keys (typically a
                LocaleRegistry). Every listed locale gets a key even when it
                has no issues. Locales that only appear in issues are appended
                in order of first occurrence.

        Returns:
            Mapping of locale code to its issues, order preserved
        """
        grouped: dict[LocaleCode, list[Issue]] = {locale: [] for locale in locales}
        for issue in self.issues:
            grouped.setdefault(issue.locale, []).append(issue)
        return {locale: tuple(items) for locale, items in grouped.items()}
