"""Field resolution package.

Resolves one display value per field from per-locale content using a
deterministic fallback chain.

Python 3.13+.
"""

from .resolver import (
    FallbackInfo,
    ResolvedSEO,
    SEOBundle,
    available_locales,
    empty_value,
    has_content,
    is_empty,
    resolve,
    resolve_keywords,
    resolve_rich_text,
    resolve_seo,
    resolve_text,
)

__all__ = [
    "FallbackInfo",
    "ResolvedSEO",
    "SEOBundle",
    "available_locales",
    "empty_value",
    "has_content",
    "is_empty",
    "resolve",
    "resolve_keywords",
    "resolve_rich_text",
    "resolve_seo",
    "resolve_text",
]
