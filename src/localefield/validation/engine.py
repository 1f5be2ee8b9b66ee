"""Rule engine: validate one localized field against one rule.

validate_field() is a pure function of its inputs. Every content defect is
returned as an Issue; the only exception it raises is ConfigError for a
malformed rule, before any value is read.

Check order (determines issue order before deduplication):

    1. Absent field: Missing/error when required, nothing else runs
    2. Per field: Empty/error when required and the default locale is empty
    3. Per locale, in registry order:
       emptiness, min/max length, deviation from default, placeholders, format

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from localefield.constants import SUGGESTION_PREVIEW_LENGTH
from localefield.diagnostics import Issue
from localefield.enums import FieldShape, IssueKind, Severity
from localefield.locales import LocaleRegistry, default_registry
from localefield.resolution import has_content
from localefield.types import FieldName, LocaleCode

from .formats import matches_format
from .rules import ValidationRule, check_rule

__all__ = ["is_translated", "validate_field"]

logger = logging.getLogger(__name__)


def is_translated(value: object) -> bool:
    """Check whether a stored value counts as a translation.

    Non-blank strings and non-empty block/keyword collections count; absent
    values, blank strings and values of any other type do not.
    """
    return has_content(value, FieldShape.TEXT) or has_content(value, FieldShape.RICH_TEXT)


def _preview(text: str) -> str:
    if len(text) > SUGGESTION_PREVIEW_LENGTH:
        return text[:SUGGESTION_PREVIEW_LENGTH] + "..."
    return text


def _check_locale(
    value: object,
    field_name: FieldName,
    locale: LocaleCode,
    rule: ValidationRule,
    *,
    is_default: bool,
    default_value: object,
) -> list[Issue]:
    """Run the per-locale checks for one value."""
    issues: list[Issue] = []

    if not is_translated(value):
        if is_default and rule.required:
            issues.append(
                Issue(
                    kind=IssueKind.EMPTY,
                    field=field_name,
                    locale=locale,
                    severity=Severity.ERROR,
                    message=f'"{field_name}" is empty in {locale}',
                )
            )
        elif not is_default and is_translated(default_value):
            suggestion = None
            if isinstance(default_value, str):
                suggestion = f'Default locale content: "{_preview(default_value)}"'
            issues.append(
                Issue(
                    kind=IssueKind.EMPTY,
                    field=field_name,
                    locale=locale,
                    severity=Severity.WARNING,
                    message=f'"{field_name}" is not translated in {locale}',
                    suggestion=suggestion,
                )
            )
        return issues

    # Length, placeholder and format checks only apply to text.
    if not isinstance(value, str):
        return issues

    length = len(value)

    if rule.min_length is not None and length < rule.min_length:
        issues.append(
            Issue(
                kind=IssueKind.LENGTH_MISMATCH,
                field=field_name,
                locale=locale,
                severity=Severity.WARNING,
                message=f'"{field_name}" is too short in {locale} ({length} < {rule.min_length})',
            )
        )

    if rule.max_length is not None and length > rule.max_length:
        issues.append(
            Issue(
                kind=IssueKind.LENGTH_MISMATCH,
                field=field_name,
                locale=locale,
                severity=Severity.ERROR,
                message=f'"{field_name}" is too long in {locale} ({length} > {rule.max_length})',
            )
        )

    # No baseline, no deviation check: an empty default skips this silently.
    if (
        rule.length_deviation_threshold is not None
        and not is_default
        and isinstance(default_value, str)
        and is_translated(default_value)
    ):
        difference = abs(length - len(default_value))
        if difference > rule.length_deviation_threshold * len(default_value):
            issues.append(
                Issue(
                    kind=IssueKind.LENGTH_MISMATCH,
                    field=field_name,
                    locale=locale,
                    severity=Severity.INFO,
                    message=(
                        f'"{field_name}" length in {locale} differs from the default '
                        f"locale by {difference} characters"
                    ),
                    suggestion="Check whether the translation is incomplete or overly verbose",
                )
            )

    missing = sorted(token for token in rule.required_placeholders if token not in value)
    if missing:
        issues.append(
            Issue(
                kind=IssueKind.PLACEHOLDER_MISMATCH,
                field=field_name,
                locale=locale,
                severity=Severity.ERROR,
                message=f'"{field_name}" is missing placeholders in {locale}: {", ".join(missing)}',
                suggestion="Make sure every placeholder appears in the translation",
            )
        )

    if rule.format is not None and not matches_format(value, rule.format):
        issues.append(
            Issue(
                kind=IssueKind.INVALID_FORMAT,
                field=field_name,
                locale=locale,
                severity=Severity.ERROR,
                message=(
                    f'"{field_name}" has an invalid format in {locale} '
                    f"(expected {rule.format})"
                ),
            )
        )

    return issues


def validate_field(
    field: Mapping[LocaleCode, object] | None,
    field_name: FieldName,
    rule: ValidationRule | None = None,
    *,
    registry: LocaleRegistry | None = None,
) -> tuple[Issue, ...]:
    """Validate one localized field.

    Args:
        field: Per-locale values; None means the field is absent from the record
        field_name: Name reported in every Issue
        rule: Rule to apply (default: ValidationRule(), i.e. optional field)
        registry: Locale registry (default: default_registry())

    Returns:
        Issues in emission order. Not deduplicated: the per-field default
        check and the per-locale emptiness check may report the same slot.

    Raises:
        ConfigError: If the rule is malformed

    Example:
        >>> registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")
        >>> issues = validate_field({"zh-CN": "芯片A"}, "title",
        ...                         ValidationRule(required=True), registry=registry)
        >>> [(i.locale, str(i.severity)) for i in issues]
        [('en', 'warning'), ('ja', 'warning')]
    """
    rule = rule if rule is not None else ValidationRule()
    check_rule(rule, field_name)
    registry = registry if registry is not None else default_registry()
    default_locale = registry.default_locale

    if not isinstance(field, Mapping):
        if not rule.required:
            return ()
        logger.debug("Required field '%s' is absent", field_name)
        return (
            Issue(
                kind=IssueKind.MISSING,
                field=field_name,
                locale=default_locale,
                severity=Severity.ERROR,
                message=f'Field "{field_name}" is missing entirely',
            ),
        )

    issues: list[Issue] = []
    default_value = field.get(default_locale)

    if rule.required and not is_translated(default_value):
        issues.append(
            Issue(
                kind=IssueKind.EMPTY,
                field=field_name,
                locale=default_locale,
                severity=Severity.ERROR,
                message=f'Default locale ({default_locale}) value of "{field_name}" is empty',
                suggestion="Fill in the default locale first",
            )
        )

    for locale in registry:
        issues.extend(
            _check_locale(
                field.get(locale),
                field_name,
                locale,
                rule,
                is_default=locale == default_locale,
                default_value=default_value,
            )
        )

    logger.debug("Validated field '%s': %d issue(s)", field_name, len(issues))
    return tuple(issues)
