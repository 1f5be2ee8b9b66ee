"""Enumerations for LocaleField type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so reports serialize to plain
strings ("error", "length_mismatch") without touching ``.value``.

Python 3.13+.
"""

from enum import StrEnum


class IssueKind(StrEnum):
    """Kind of translation defect found by the rule engine.

    StrEnum provides automatic string conversion: str(IssueKind.EMPTY) == "empty"
    """

    MISSING = "missing"
    """The field is entirely absent from the record"""

    EMPTY = "empty"
    """The field exists but has no value for a locale"""

    LENGTH_MISMATCH = "length_mismatch"
    """Value too short, too long, or deviating from the default-locale length"""

    INVALID_FORMAT = "invalid_format"
    """Value does not match the configured format (email, url, ...)"""

    PLACEHOLDER_MISMATCH = "placeholder_mismatch"
    """Value is missing one or more required placeholder tokens"""


class Severity(StrEnum):
    """Severity of an issue.

    StrEnum provides automatic string conversion: str(Severity.ERROR) == "error"
    """

    ERROR = "error"
    """Content is broken for this locale and must be fixed"""

    WARNING = "warning"
    """Content is incomplete (typically an untranslated locale)"""

    INFO = "info"
    """Soft signal only, e.g. a translation that may be truncated or padded"""


class FieldFormat(StrEnum):
    """Value format enforced by a validation rule.

    StrEnum provides automatic string conversion: str(FieldFormat.URL) == "url"
    """

    EMAIL = "email"
    """local@domain.tld with no whitespace"""

    URL = "url"
    """Absolute URI with scheme and authority"""

    PHONE = "phone"
    """Digits, spaces, hyphens and parentheses, optional leading +"""

    HTML_BALANCED = "html_balanced"
    """Equal count of opening and closing tags"""


class FieldShape(StrEnum):
    """Shape of the per-locale values held by a localized field.

    Drives the "non-empty" predicate and the empty value used by the resolver.
    """

    TEXT = "text"
    """Plain string; blank after trimming counts as empty"""

    RICH_TEXT = "rich_text"
    """Ordered sequence of opaque content blocks"""

    KEYWORDS = "keywords"
    """Collection of keyword strings"""


__all__ = [
    "FieldFormat",
    "FieldShape",
    "IssueKind",
    "Severity",
]
