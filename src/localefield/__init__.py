"""LocaleField - localized content resolution and translation quality audits.

Content fields are stored as mappings from locale code to value across a
fixed set of supported locales with one default locale. LocaleField resolves
one display value per field through a deterministic fallback chain and
audits whole records for missing, malformed, or suspicious translations.

Public API:
    LocaleRegistry - Ordered, immutable set of supported locales
    default_registry - The platform's process-wide registry
    resolve / resolve_text / resolve_rich_text / resolve_seo - Display values
    is_empty / available_locales - Field inspection for reporting
    ValidationRule - Declarative per-field rule
    validate_field - Validate one field against one rule
    audit_record - Validate a whole record and aggregate statistics
    translation_stats - Strict audit with every field required
    locale_completion - Per-locale completion ranking

Exceptions:
    LocaleFieldError - Base exception class
    ConfigError - Invalid locale set or validation rule

Submodules:
    localefield.diagnostics - Issue/Stats values, error codes, report formatting
    localefield.loading - Storage key normalization and record loaders
    localefield.validation - Rules, presets, format checks
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import ConfigError, Issue, LocaleCompletion, LocaleFieldError, Stats
from .enums import FieldFormat, FieldShape, IssueKind, Severity
from .locales import LocaleRegistry, LocaleSpec, default_registry
from .resolution import (
    FallbackInfo,
    ResolvedSEO,
    SEOBundle,
    available_locales,
    is_empty,
    resolve,
    resolve_keywords,
    resolve_rich_text,
    resolve_seo,
    resolve_text,
)
from .validation import (
    PRESET_RULES,
    ValidationRule,
    audit_record,
    locale_completion,
    translation_stats,
    validate_field,
)

try:
    __version__ = _get_version("localefield")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "PRESET_RULES",
    "ConfigError",
    "FallbackInfo",
    "FieldFormat",
    "FieldShape",
    "Issue",
    "IssueKind",
    "LocaleCompletion",
    "LocaleFieldError",
    "LocaleRegistry",
    "LocaleSpec",
    "ResolvedSEO",
    "SEOBundle",
    "Severity",
    "Stats",
    "ValidationRule",
    "__version__",
    "audit_record",
    "available_locales",
    "default_registry",
    "is_empty",
    "locale_completion",
    "resolve",
    "resolve_keywords",
    "resolve_rich_text",
    "resolve_seo",
    "resolve_text",
    "translation_stats",
    "validate_field",
]
