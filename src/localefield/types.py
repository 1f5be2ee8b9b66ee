"""Type aliases for the localized content domain.

Provides semantic type aliases used throughout the package and by user code
when annotating resolver and audit call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Collection, Mapping, Sequence
from typing import TypeAlias

__all__ = [
    "FieldName",
    "KeywordList",
    "LocaleCode",
    "LocalizedField",
    "RichBlockSequence",
    "ScalarText",
]

LocaleCode: TypeAlias = str
"""BCP-47-like locale code (e.g., 'zh-CN', 'en', 'ja')."""

FieldName: TypeAlias = str
"""Name of a content field within a record (e.g., 'title', 'seoDescription')."""

ScalarText: TypeAlias = str
"""Single translated string."""

RichBlockSequence: TypeAlias = Sequence[object]
"""Ordered sequence of rich-content blocks (opaque to the engine)."""

KeywordList: TypeAlias = Collection[str]
"""Keywords for one locale (list, tuple, or set of strings)."""

LocalizedField: TypeAlias = Mapping[LocaleCode, object]
"""Per-locale values of one field; absent keys mean untranslated."""
