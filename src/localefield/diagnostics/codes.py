"""Diagnostic codes and data structures.

Defines configuration error codes and the diagnostic record carried by
LocaleField exceptions.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale registry configuration errors
        2000-2999: Validation rule configuration errors
    """

    # Locale registry errors (1000-1999)
    EMPTY_LOCALE_SET = 1001
    NO_DEFAULT_LOCALE = 1002
    MULTIPLE_DEFAULT_LOCALES = 1003
    DUPLICATE_LOCALE = 1004
    INVALID_LOCALE_CODE = 1005
    UNKNOWN_LOCALE = 1006

    # Rule errors (2000-2999)
    INVALID_RULE = 2001
    UNKNOWN_FORMAT = 2002
    UNKNOWN_RULE_OPTION = 2003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale involved in the error, if any
        field_name: Content field involved in the error, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    field_name: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DUPLICATE_LOCALE]: Locale 'en' appears more than once
              = locale: en
              = help: Remove the repeated entry from the locale set

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
