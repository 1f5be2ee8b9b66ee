"""Field resolver: pick one display value from a localized field.

Resolution follows a fixed fallback chain so that every renderer shows the
same locale for the same input:

    1. requested locale
    2. fallback locale (the registry default unless given)
    3. first non-empty registered locale, in registry order
    4. the shape's empty value

Keys the registry does not know are only read when named as the requested
or fallback locale; the scan never returns them.

The chain is identical for every field shape; only the "non-empty" predicate
and the empty value differ. The resolver never raises for missing content.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Collection, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import cast

from localefield.enums import FieldShape
from localefield.locales import LocaleRegistry, default_registry
from localefield.types import FieldName, KeywordList, LocaleCode, RichBlockSequence

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

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback when resolution returns a value from
    a locale other than the requested one.

    Attributes:
        requested_locale: The locale the caller asked for
        resolved_locale: The locale whose value was returned
        field_name: Name of the resolved field ('' when not given)

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.field_name}: {info.resolved_locale} "
        ...           f"(requested {info.requested_locale})")
        >>> resolve_text({"zh-CN": "芯片"}, "en", field_name="title",
        ...              on_fallback=log_fallback)
        title: zh-CN (requested en)
        '芯片'
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    field_name: FieldName


@dataclass(frozen=True, slots=True)
class SEOBundle:
    """SEO metadata of one document, with per-locale inner fields.

    Attributes:
        title: Localized page title
        description: Localized meta description
        keywords: Localized keyword lists
        image: Share image reference (not localized, opaque to the engine)
    """

    title: Mapping[LocaleCode, object] | None = None
    description: Mapping[LocaleCode, object] | None = None
    keywords: Mapping[LocaleCode, object] | None = None
    image: object = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, object] | None) -> SEOBundle:
        """Build a bundle from a stored SEO object.

        Accepts both ``image`` and the storage name ``ogImage``. Inner values
        that are not mappings are treated as absent.
        """
        if not isinstance(data, Mapping):
            return cls()

        def _field(key: str) -> Mapping[LocaleCode, object] | None:
            value = data.get(key)
            return value if isinstance(value, Mapping) else None

        image = data.get("image")
        if image is None:
            image = data.get("ogImage")
        return cls(
            title=_field("title"),
            description=_field("description"),
            keywords=_field("keywords"),
            image=image,
        )


@dataclass(frozen=True, slots=True)
class ResolvedSEO:
    """SEO bundle with every inner field resolved to one value.

    Attributes:
        title: Resolved title ('' when no locale has one)
        description: Resolved description ('' when no locale has one)
        keywords: Resolved keyword list (empty when no locale has one)
        image: Share image reference, passed through unchanged
    """

    title: str = ""
    description: str = ""
    keywords: KeywordList = ()
    image: object = None


# ============================================================================
# SHAPE PREDICATES
# ============================================================================


def has_content(value: object, shape: FieldShape = FieldShape.TEXT) -> bool:
    """Check whether one per-locale value counts as translated.

    Text is non-empty when it has at least one non-whitespace character.
    Rich text and keywords are non-empty when the collection has at least
    one entry. Values of the wrong type are never non-empty.
    """
    match shape:
        case FieldShape.TEXT:
            return isinstance(value, str) and bool(value.strip())
        case FieldShape.RICH_TEXT | FieldShape.KEYWORDS:
            if isinstance(value, (str, bytes, Mapping)):
                return False
            return isinstance(value, Collection) and len(value) > 0


def empty_value(shape: FieldShape) -> object:
    """Value returned when nothing in a field resolves."""
    match shape:
        case FieldShape.TEXT:
            return ""
        case FieldShape.RICH_TEXT | FieldShape.KEYWORDS:
            return ()


def _candidates(
    requested_locale: LocaleCode,
    fallback_locale: LocaleCode,
    registry: LocaleRegistry,
) -> Iterator[LocaleCode]:
    """Yield locale keys in fallback-chain order."""
    yield requested_locale
    yield fallback_locale
    yield from registry


# ============================================================================
# RESOLUTION
# ============================================================================


def resolve(
    field: Mapping[LocaleCode, object] | None,
    requested_locale: LocaleCode,
    fallback_locale: LocaleCode | None = None,
    *,
    registry: LocaleRegistry | None = None,
    shape: FieldShape = FieldShape.TEXT,
    field_name: FieldName = "",
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> object:
    """Resolve the display value of a localized field.

    Args:
        field: Per-locale values (None or a non-mapping resolves to empty)
        requested_locale: Locale the caller wants to display
        fallback_locale: Locale tried second (default: registry default)
        registry: Locale registry (default: default_registry())
        shape: Shape of the per-locale values
        field_name: Field name reported to on_fallback and in logs
        on_fallback: Optional callback invoked when the returned value comes
            from a locale other than requested_locale

    Returns:
        The stored value of the first non-empty locale in the chain, or the
        shape's empty value
    """
    if not isinstance(field, Mapping):
        return empty_value(shape)

    registry = registry if registry is not None else default_registry()
    fallback = fallback_locale if fallback_locale is not None else registry.default_locale

    for locale in _candidates(requested_locale, fallback, registry):
        value = field.get(locale)
        if not has_content(value, shape):
            continue
        if locale != requested_locale:
            logger.debug(
                "Field '%s' resolved from %s (requested %s)",
                field_name,
                locale,
                requested_locale,
            )
            if on_fallback is not None:
                on_fallback(FallbackInfo(requested_locale, locale, field_name))
        return value

    return empty_value(shape)


def resolve_text(
    field: Mapping[LocaleCode, object] | None,
    requested_locale: LocaleCode,
    fallback_locale: LocaleCode | None = None,
    *,
    registry: LocaleRegistry | None = None,
    field_name: FieldName = "",
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> str:
    """Resolve a scalar text field; returns '' when nothing is translated."""
    return cast(
        "str",
        resolve(
            field,
            requested_locale,
            fallback_locale,
            registry=registry,
            shape=FieldShape.TEXT,
            field_name=field_name,
            on_fallback=on_fallback,
        ),
    )


def resolve_rich_text(
    field: Mapping[LocaleCode, object] | None,
    requested_locale: LocaleCode,
    fallback_locale: LocaleCode | None = None,
    *,
    registry: LocaleRegistry | None = None,
    field_name: FieldName = "",
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> RichBlockSequence:
    """Resolve a rich-content block sequence; returns () when none has blocks."""
    return cast(
        "Sequence[object]",
        resolve(
            field,
            requested_locale,
            fallback_locale,
            registry=registry,
            shape=FieldShape.RICH_TEXT,
            field_name=field_name,
            on_fallback=on_fallback,
        ),
    )


def resolve_keywords(
    field: Mapping[LocaleCode, object] | None,
    requested_locale: LocaleCode,
    fallback_locale: LocaleCode | None = None,
    *,
    registry: LocaleRegistry | None = None,
    field_name: FieldName = "",
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> KeywordList:
    """Resolve a keyword list; returns () when no locale has keywords."""
    return cast(
        "Collection[str]",
        resolve(
            field,
            requested_locale,
            fallback_locale,
            registry=registry,
            shape=FieldShape.KEYWORDS,
            field_name=field_name,
            on_fallback=on_fallback,
        ),
    )


def resolve_seo(
    bundle: SEOBundle | Mapping[str, object] | None,
    requested_locale: LocaleCode,
    fallback_locale: LocaleCode | None = None,
    *,
    registry: LocaleRegistry | None = None,
    on_fallback: Callable[[FallbackInfo], None] | None = None,
) -> ResolvedSEO:
    """Resolve an SEO bundle field by field.

    Title, description, and keywords each run their own fallback chain, so
    the result may mix locales. The bundle is never swapped as a whole.

    Example:
        >>> seo = {"title": {"zh-CN": "芯片", "en": "Chips"},
        ...        "keywords": {"zh-CN": ["芯片"]}}
        >>> resolve_seo(seo, "en")
        ResolvedSEO(title='Chips', description='', keywords=['芯片'], image=None)
    """
    if not isinstance(bundle, SEOBundle):
        bundle = SEOBundle.from_mapping(bundle)

    return ResolvedSEO(
        title=resolve_text(
            bundle.title,
            requested_locale,
            fallback_locale,
            registry=registry,
            field_name="title",
            on_fallback=on_fallback,
        ),
        description=resolve_text(
            bundle.description,
            requested_locale,
            fallback_locale,
            registry=registry,
            field_name="description",
            on_fallback=on_fallback,
        ),
        keywords=resolve_keywords(
            bundle.keywords,
            requested_locale,
            fallback_locale,
            registry=registry,
            field_name="keywords",
            on_fallback=on_fallback,
        ),
        image=bundle.image,
    )


# ============================================================================
# INSPECTION
# ============================================================================


def is_empty(
    field: Mapping[LocaleCode, object] | None,
    shape: FieldShape = FieldShape.TEXT,
    *,
    registry: LocaleRegistry | None = None,
) -> bool:
    """Check whether no registered locale of a field holds a non-empty value.

    Keys outside the registry are ignored. When this returns False, resolve()
    is guaranteed to return a non-empty value for any requested locale.
    """
    return not available_locales(field, registry=registry, shape=shape)


def available_locales(
    field: Mapping[LocaleCode, object] | None,
    *,
    registry: LocaleRegistry | None = None,
    shape: FieldShape = FieldShape.TEXT,
) -> tuple[LocaleCode, ...]:
    """Registered locales holding a non-empty value, in registry order."""
    if not isinstance(field, Mapping):
        return ()
    registry = registry if registry is not None else default_registry()
    return tuple(locale for locale in registry if has_content(field.get(locale), shape))
