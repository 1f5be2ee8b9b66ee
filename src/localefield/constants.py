"""Shared constants for LocaleField.

Centralized configuration constants used across the locale registry,
resolver, and validation packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Supported locales: The platform's locale set and its default member
- Preset rule values: Length limits and deviation thresholds per field kind
- Reporting: Suggestion preview and sanitization limits

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Supported locales
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    # Preset rule values
    "SEO_TITLE_MAX_LENGTH",
    "SEO_DESCRIPTION_MIN_LENGTH",
    "SEO_DESCRIPTION_MAX_LENGTH",
    "PRODUCT_NAME_MAX_LENGTH",
    "PRODUCT_DESCRIPTION_MIN_LENGTH",
    "BRAND_DESCRIPTION_MIN_LENGTH",
    # Format checks
    "PHONE_MIN_CHARACTERS",
    # Reporting
    "SUGGESTION_PREVIEW_LENGTH",
    "MAX_REPORT_MESSAGE_LENGTH",
]

# ============================================================================
# SUPPORTED LOCALES
# ============================================================================
#
# Ordered (code, title, is_default) triples. Order matters: the resolver's
# scan fallback and every per-locale report walk locales in this order.
# Titles are the native-language labels shown to editors.

SUPPORTED_LOCALES: tuple[tuple[str, str, bool], ...] = (
    ("zh-CN", "简体中文", True),
    ("zh-TW", "繁體中文", False),
    ("en", "English", False),
    ("ja", "日本語", False),
    ("ko", "한국어", False),
    ("de", "Deutsch", False),
    ("fr", "Français", False),
    ("es", "Español", False),
    ("ru", "Русский", False),
    ("ar", "العربية", False),
)

# Code of the entry flagged default above.
DEFAULT_LOCALE: str = next(code for code, _, is_default in SUPPORTED_LOCALES if is_default)

# ============================================================================
# PRESET RULE VALUES
# ============================================================================

# Search engines truncate titles beyond ~60 characters.
SEO_TITLE_MAX_LENGTH: int = 60

SEO_DESCRIPTION_MIN_LENGTH: int = 50
SEO_DESCRIPTION_MAX_LENGTH: int = 160

PRODUCT_NAME_MAX_LENGTH: int = 100
PRODUCT_DESCRIPTION_MIN_LENGTH: int = 50
BRAND_DESCRIPTION_MIN_LENGTH: int = 100

# ============================================================================
# FORMAT CHECKS
# ============================================================================

# Minimum count of digit/space/hyphen/paren characters in a phone number.
PHONE_MIN_CHARACTERS: int = 10

# ============================================================================
# REPORTING
# ============================================================================

# Characters of the default-locale value quoted in "untranslated" suggestions.
SUGGESTION_PREVIEW_LENGTH: int = 50

# Maximum message length before truncation when a report is sanitized.
MAX_REPORT_MESSAGE_LENGTH: int = 100
