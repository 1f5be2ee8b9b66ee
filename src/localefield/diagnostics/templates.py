"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All configuration error messages are created here. NO f-strings in
    exception constructors! Provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def empty_locale_set() -> Diagnostic:
        """Locale set has no members.

        Returns:
            Diagnostic for EMPTY_LOCALE_SET
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_LOCALE_SET,
            message="Locale set must contain at least one locale",
            hint="Configure the supported locales before building the registry",
        )

    @staticmethod
    def no_default_locale(codes: Iterable[str]) -> Diagnostic:
        """No locale flagged as default.

        Args:
            codes: Locale codes in the rejected set

        Returns:
            Diagnostic for NO_DEFAULT_LOCALE
        """
        listed = ", ".join(codes)
        return Diagnostic(
            code=DiagnosticCode.NO_DEFAULT_LOCALE,
            message=f"No default locale flagged in locale set ({listed})",
            hint="Flag exactly one locale with is_default=True",
        )

    @staticmethod
    def multiple_default_locales(codes: Iterable[str]) -> Diagnostic:
        """More than one locale flagged as default.

        Args:
            codes: Locale codes flagged as default

        Returns:
            Diagnostic for MULTIPLE_DEFAULT_LOCALES
        """
        listed = ", ".join(codes)
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_DEFAULT_LOCALES,
            message=f"Multiple default locales flagged: {listed}",
            hint="Flag exactly one locale with is_default=True",
        )

    @staticmethod
    def duplicate_locale(code: str) -> Diagnostic:
        """Locale code appears twice.

        Args:
            code: The repeated locale code

        Returns:
            Diagnostic for DUPLICATE_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_LOCALE,
            message=f"Locale '{code}' appears more than once",
            hint="Remove the repeated entry from the locale set",
            locale_code=code,
        )

    @staticmethod
    def invalid_locale_code(code: object) -> Diagnostic:
        """Locale code is empty, not a string, or padded with whitespace.

        Args:
            code: The rejected value

        Returns:
            Diagnostic for INVALID_LOCALE_CODE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE_CODE,
            message=f"Invalid locale code: {code!r}",
            hint="Locale codes must be non-empty strings without surrounding whitespace",
        )

    @staticmethod
    def unknown_locale(code: str, known: Iterable[str]) -> Diagnostic:
        """Locale referenced by configuration is not in the registry.

        Args:
            code: The unknown locale code
            known: Codes the registry does contain

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        listed = ", ".join(known)
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"Locale '{code}' is not in the locale set ({listed})",
            locale_code=code,
        )

    @staticmethod
    def invalid_rule(reason: str, field_name: str | None = None) -> Diagnostic:
        """Validation rule is internally inconsistent.

        Args:
            reason: What is wrong with the rule
            field_name: Field the rule was supplied for, if known

        Returns:
            Diagnostic for INVALID_RULE
        """
        where = f" for field '{field_name}'" if field_name else ""
        return Diagnostic(
            code=DiagnosticCode.INVALID_RULE,
            message=f"Invalid validation rule{where}: {reason}",
            hint="Fix the rule configuration; rules are checked before any field is read",
            field_name=field_name,
        )

    @staticmethod
    def unknown_format(value: object, allowed: Iterable[str]) -> Diagnostic:
        """Rule names a format the engine does not check.

        Args:
            value: The rejected format name
            allowed: Supported format names

        Returns:
            Diagnostic for UNKNOWN_FORMAT
        """
        listed = ", ".join(allowed)
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_FORMAT,
            message=f"Unknown format {value!r} (expected one of: {listed})",
        )

    @staticmethod
    def unknown_rule_option(name: str) -> Diagnostic:
        """Option bag carries a key that maps to no rule attribute.

        Args:
            name: The unrecognized option key

        Returns:
            Diagnostic for UNKNOWN_RULE_OPTION
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_RULE_OPTION,
            message=f"Unknown validation rule option '{name}'",
            hint=(
                "Supported options: required, minLength, maxLength, "
                "lengthDifferenceThreshold, requiredPlaceholders, format"
            ),
        )
