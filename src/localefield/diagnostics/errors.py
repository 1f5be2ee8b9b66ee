"""LocaleField exception hierarchy with structured diagnostics.

Only configuration problems are exceptions. Content defects (missing
translations, bad formats) are reported as Issue values, never raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ConfigError", "LocaleFieldError"]


class LocaleFieldError(Exception):
    """Base exception for all LocaleField errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleFieldError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, or None for plain-message errors."""
        return self.diagnostic.code if self.diagnostic is not None else None


class ConfigError(LocaleFieldError):
    """Invalid locale set or validation rule.

    Raised when constructing a LocaleRegistry with zero or several default
    locales, duplicate or malformed codes, and when a ValidationRule is
    internally inconsistent (e.g. min_length > max_length).

    Fatal to the request: no resolution or validation can proceed.
    """
