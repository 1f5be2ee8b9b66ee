"""Record audit: validate every field of a content record and aggregate.

Architecture:
    - audit_record(): Main entry point, runs the rule engine per field,
      tallies translated slots, deduplicates issues
    - translation_stats(): Strict audit, every field required and every
      untranslated slot reported
    - locale_completion(): Per-locale completion ranking, worst first
    - deduplicate_issues(): First-wins deduplication by (kind, field, locale)

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from localefield.diagnostics import Issue, IssueKey, LocaleCompletion, Stats
from localefield.enums import IssueKind, Severity
from localefield.locales import LocaleRegistry, default_registry
from localefield.types import FieldName, LocaleCode

from .engine import is_translated, validate_field
from .rules import ValidationRule

__all__ = [
    "audit_record",
    "deduplicate_issues",
    "locale_completion",
    "translation_stats",
]

logger = logging.getLogger(__name__)

# Rule applied to every field by translation_stats().
_REQUIRED = ValidationRule(required=True)


def deduplicate_issues(issues: Iterable[Issue]) -> tuple[Issue, ...]:
    """Keep the first issue for every (kind, field, locale) key.

    Relative order of first occurrences is preserved. Message text does not
    take part in the key, so a later issue with a different message for the
    same slot is dropped.
    """
    seen: dict[IssueKey, Issue] = {}
    for issue in issues:
        seen.setdefault(issue.key, issue)
    return tuple(seen.values())


def _field_values(field: object) -> Mapping[LocaleCode, object]:
    return field if isinstance(field, Mapping) else {}


def audit_record(
    fields: Mapping[FieldName, Mapping[LocaleCode, object] | None],
    rules: Mapping[FieldName, ValidationRule] | None = None,
    *,
    registry: LocaleRegistry | None = None,
) -> Stats:
    """Audit a content record for translation completeness and quality.

    Args:
        fields: Record as field name -> per-locale values (None for a field
            the storage layer returned without content)
        rules: Rules per field name; fields without an entry get
            ValidationRule(). Rules for fields not in the record are ignored.
        registry: Locale registry (default: default_registry())

    Returns:
        Stats with slot counts, completion rate, and deduplicated issues

    Raises:
        ConfigError: If any applicable rule is malformed

    Example:
        >>> registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")
        >>> stats = audit_record({"title": {"zh-CN": "芯片A"}},
        ...                      {"title": ValidationRule(required=True)},
        ...                      registry=registry)
        >>> stats.total_field_slots, stats.translated_field_slots
        (3, 1)
    """
    registry = registry if registry is not None else default_registry()
    rules = rules if rules is not None else {}

    collected: list[Issue] = []
    for field_name, field in fields.items():
        rule = rules.get(field_name, ValidationRule())
        collected.extend(validate_field(field, field_name, rule, registry=registry))

    return _summarize(fields, collected, registry)


def translation_stats(
    fields: Mapping[FieldName, Mapping[LocaleCode, object] | None],
    *,
    registry: LocaleRegistry | None = None,
) -> Stats:
    """Audit a record treating every field as required.

    Every untranslated (field, locale) slot is reported as Empty: an error
    for the registry's default locale, a warning for any other locale. The
    rule engine then runs each field with ``ValidationRule(required=True)``.
    Slot issues come first for each field, so they win deduplication.

    Example:
        >>> registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")
        >>> stats = translation_stats({"title": {"en": "Chip"}}, registry=registry)
        >>> [(i.locale, str(i.severity)) for i in stats.issues]
        [('zh-CN', 'error'), ('ja', 'warning')]
    """
    registry = registry if registry is not None else default_registry()

    collected: list[Issue] = []
    for field_name, field in fields.items():
        values = _field_values(field)
        for locale in registry:
            if is_translated(values.get(locale)):
                continue
            collected.append(
                Issue(
                    kind=IssueKind.EMPTY,
                    field=field_name,
                    locale=locale,
                    severity=(
                        Severity.ERROR if locale == registry.default_locale else Severity.WARNING
                    ),
                    message=f'"{field_name}" is not translated in {locale}',
                )
            )
        collected.extend(validate_field(field, field_name, _REQUIRED, registry=registry))

    return _summarize(fields, collected, registry)


def _summarize(
    fields: Mapping[FieldName, Mapping[LocaleCode, object] | None],
    collected: list[Issue],
    registry: LocaleRegistry,
) -> Stats:
    """Tally translated slots, deduplicate issues, and build Stats."""
    translated = sum(
        1
        for field in fields.values()
        for locale in registry
        if is_translated(_field_values(field).get(locale))
    )
    total = len(fields) * len(registry)
    completion_rate = translated / total if total else 0.0
    issues = deduplicate_issues(collected)

    logger.info(
        "Audited %d field(s) across %d locale(s): %.1f%% complete, %d issue(s)",
        len(fields),
        len(registry),
        completion_rate * 100,
        len(issues),
    )
    if len(issues) != len(collected):
        logger.debug("Dropped %d duplicate issue(s)", len(collected) - len(issues))

    return Stats(
        total_field_slots=total,
        translated_field_slots=translated,
        completion_rate=completion_rate,
        issues=issues,
    )


def locale_completion(
    fields: Mapping[FieldName, Mapping[LocaleCode, object] | None],
    *,
    registry: LocaleRegistry | None = None,
) -> tuple[LocaleCompletion, ...]:
    """Rank locales by the share of fields translated into them.

    Sorted ascending by rate so the locale needing the most work comes first.
    Ties keep registry order. With no fields every rate is 0.0.

    Example:
        >>> registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")
        >>> ranking = locale_completion(
        ...     {"title": {"zh-CN": "芯片", "en": "Chip"}, "body": {"zh-CN": "正文"}},
        ...     registry=registry,
        ... )
        >>> [(c.locale, c.rate) for c in ranking]
        [('ja', 0.0), ('en', 0.5), ('zh-CN', 1.0)]
    """
    registry = registry if registry is not None else default_registry()
    field_count = len(fields)
    value_maps = [_field_values(field) for field in fields.values()]

    completions = [
        LocaleCompletion(
            locale=locale,
            rate=(
                sum(1 for values in value_maps if is_translated(values.get(locale)))
                / field_count
                if field_count
                else 0.0
            ),
        )
        for locale in registry
    ]
    # list.sort is stable: equal rates stay in registry order.
    completions.sort(key=lambda completion: completion.rate)
    return tuple(completions)
