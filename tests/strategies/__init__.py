"""Hypothesis strategies for LocaleField property-based testing.

Usage:
    from tests.strategies import locale_registries, localized_text_fields
    from tests.strategies.content import content_records

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_registries, localized_text_fields, content_records
"""

from .content import (
    FIELD_NAMES,
    LOCALE_POOL,
    content_records,
    locale_registries,
    localized_text_fields,
    translated_text,
    untranslated_values,
)

__all__ = [
    "FIELD_NAMES",
    "LOCALE_POOL",
    "content_records",
    "locale_registries",
    "localized_text_fields",
    "translated_text",
    "untranslated_values",
]
