"""Validation rule descriptors and the preset rule catalogue.

Rules are immutable configuration supplied by the caller per field name.
They carry no behavior; the rule engine interprets them.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Real
from types import MappingProxyType

from localefield.constants import (
    BRAND_DESCRIPTION_MIN_LENGTH,
    PRODUCT_DESCRIPTION_MIN_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    SEO_DESCRIPTION_MAX_LENGTH,
    SEO_DESCRIPTION_MIN_LENGTH,
    SEO_TITLE_MAX_LENGTH,
)
from localefield.diagnostics import ConfigError, ErrorTemplate
from localefield.enums import FieldFormat

__all__ = [
    "PRESET_RULES",
    "ValidationRule",
    "check_rule",
    "rule_from_mapping",
    "with_placeholders",
]


@dataclass(frozen=True, slots=True)
class ValidationRule:
    """Immutable validation descriptor for one content field.

    ``ValidationRule()`` (all defaults) performs no checks beyond emptiness
    bookkeeping: the field is optional and untranslated locales are only
    reported when the default locale has content.

    Attributes:
        required: Default-locale value must be present
        min_length: Values shorter than this are a warning
        max_length: Values longer than this are an error
        length_deviation_threshold: Fraction (0..1) of the default-locale
            length a translation may differ by before an info is raised
        required_placeholders: Tokens that must appear verbatim in every value
        format: Value format to enforce

    Example:
        >>> rule = ValidationRule(required=True, max_length=60)
        >>> rule.max_length
        60
    """

    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    length_deviation_threshold: float | None = None
    required_placeholders: frozenset[str] = field(default_factory=frozenset)
    format: FieldFormat | None = None

    def __post_init__(self) -> None:
        """Coerce convenience spellings to canonical attribute types.

        A format given by name ("url") becomes FieldFormat.URL; unknown names
        are kept as-is and rejected by check_rule(). Placeholders given as a
        list, tuple, or single string become a frozenset.

        Raises:
            ConfigError: If placeholders are not an iterable of hashable tokens
        """
        fmt = self.format
        if isinstance(fmt, str) and not isinstance(fmt, FieldFormat) and fmt in FieldFormat:
            object.__setattr__(self, "format", FieldFormat(fmt))
        placeholders = self.required_placeholders
        if isinstance(placeholders, str):
            object.__setattr__(self, "required_placeholders", frozenset((placeholders,)))
        elif not isinstance(placeholders, frozenset):
            try:
                coerced = frozenset(placeholders)
            except TypeError as e:
                reason = f"required_placeholders must be strings, got {placeholders!r}"
                raise ConfigError(ErrorTemplate.invalid_rule(reason)) from e
            object.__setattr__(self, "required_placeholders", coerced)


def _is_int_or_none(value: object) -> bool:
    return value is None or (isinstance(value, int) and not isinstance(value, bool))


def check_rule(rule: ValidationRule, field_name: str | None = None) -> None:
    """Reject internally inconsistent rules.

    A bad rule is a caller programming error, so it is raised rather than
    reported as an Issue.

    Args:
        rule: Rule to check
        field_name: Field the rule applies to (used in the error message)

    Raises:
        ConfigError: On non-integer lengths, a non-numeric threshold,
            negative lengths, min_length > max_length, a threshold outside
            0..1, empty placeholder tokens, or an unknown format
    """
    reason: str | None = None
    threshold = rule.length_deviation_threshold
    if not _is_int_or_none(rule.min_length):
        reason = f"min_length must be an integer, got {rule.min_length!r}"
    elif not _is_int_or_none(rule.max_length):
        reason = f"max_length must be an integer, got {rule.max_length!r}"
    elif threshold is not None and (
        isinstance(threshold, bool) or not isinstance(threshold, Real)
    ):
        reason = f"length_deviation_threshold must be a number, got {threshold!r}"
    elif rule.min_length is not None and rule.min_length < 0:
        reason = f"min_length must be >= 0, got {rule.min_length}"
    elif rule.max_length is not None and rule.max_length < 0:
        reason = f"max_length must be >= 0, got {rule.max_length}"
    elif (
        rule.min_length is not None
        and rule.max_length is not None
        and rule.min_length > rule.max_length
    ):
        reason = f"min_length ({rule.min_length}) exceeds max_length ({rule.max_length})"
    elif rule.length_deviation_threshold is not None and not (
        0.0 <= rule.length_deviation_threshold <= 1.0
    ):
        reason = (
            "length_deviation_threshold must be between 0 and 1, "
            f"got {rule.length_deviation_threshold}"
        )
    elif any(not isinstance(token, str) or not token for token in rule.required_placeholders):
        reason = "required_placeholders must be non-empty strings"

    if reason is not None:
        raise ConfigError(ErrorTemplate.invalid_rule(reason, field_name))

    if rule.format is not None and not isinstance(rule.format, FieldFormat):
        raise ConfigError(ErrorTemplate.unknown_format(rule.format, FieldFormat))


def with_placeholders(*placeholders: str) -> ValidationRule:
    """Required rule demanding the given placeholder tokens.

    Example:
        >>> with_placeholders("{name}", "{count}").required_placeholders
        frozenset({'{count}', '{name}'})
    """
    return ValidationRule(required=True, required_placeholders=frozenset(placeholders))


# Option-bag keys accepted by rule_from_mapping, in both spellings.
_OPTION_ALIASES: dict[str, str] = {
    "required": "required",
    "minLength": "min_length",
    "min_length": "min_length",
    "maxLength": "max_length",
    "max_length": "max_length",
    "lengthDifferenceThreshold": "length_deviation_threshold",
    "lengthDeviationThreshold": "length_deviation_threshold",
    "length_deviation_threshold": "length_deviation_threshold",
    "requiredPlaceholders": "required_placeholders",
    "required_placeholders": "required_placeholders",
    "format": "format",
}

# Legacy format names used by stored rule configuration.
_FORMAT_ALIASES: dict[str, FieldFormat] = {
    "html": FieldFormat.HTML_BALANCED,
    "htmlBalanced": FieldFormat.HTML_BALANCED,
}


def _parse_format(value: object) -> FieldFormat | None:
    if value is None or isinstance(value, FieldFormat):
        return value
    if isinstance(value, str):
        if value in _FORMAT_ALIASES:
            return _FORMAT_ALIASES[value]
        if value in FieldFormat:
            return FieldFormat(value)
    raise ConfigError(ErrorTemplate.unknown_format(value, FieldFormat))


def rule_from_mapping(options: Mapping[str, object]) -> ValidationRule:
    """Build a rule from a loosely typed option bag.

    Accepts the camelCase keys used by stored content-type configuration
    (``minLength``, ``lengthDifferenceThreshold``, ...) as well as the
    snake_case attribute names. ``format`` may be a FieldFormat or its name;
    ``"html"`` is accepted for html_balanced.

    Raises:
        ConfigError: On unknown keys, unknown formats, or an inconsistent rule

    Example:
        >>> rule_from_mapping({"required": True, "maxLength": 60})
        ValidationRule(required=True, min_length=None, max_length=60, ...)
    """
    kwargs: dict[str, object] = {}
    for key, value in options.items():
        name = _OPTION_ALIASES.get(key)
        if name is None:
            raise ConfigError(ErrorTemplate.unknown_rule_option(key))
        match name:
            case "format":
                kwargs[name] = _parse_format(value)
            case "required_placeholders":
                kwargs[name] = frozenset() if value is None else value
            case "required":
                kwargs[name] = bool(value)
            case _:
                kwargs[name] = value

    rule = ValidationRule(**kwargs)  # type: ignore[arg-type]
    check_rule(rule)
    return rule


PRESET_RULES: Mapping[str, ValidationRule] = MappingProxyType(
    {
        "seo_title": ValidationRule(
            required=True,
            max_length=SEO_TITLE_MAX_LENGTH,
            length_deviation_threshold=0.5,
        ),
        "seo_description": ValidationRule(
            required=True,
            min_length=SEO_DESCRIPTION_MIN_LENGTH,
            max_length=SEO_DESCRIPTION_MAX_LENGTH,
            length_deviation_threshold=0.3,
        ),
        "product_name": ValidationRule(
            required=True,
            max_length=PRODUCT_NAME_MAX_LENGTH,
            length_deviation_threshold=0.5,
        ),
        "product_description": ValidationRule(
            required=True,
            min_length=PRODUCT_DESCRIPTION_MIN_LENGTH,
            length_deviation_threshold=0.4,
        ),
        "brand_description": ValidationRule(
            required=False,
            min_length=BRAND_DESCRIPTION_MIN_LENGTH,
            length_deviation_threshold=0.3,
        ),
        "email": ValidationRule(required=True, format=FieldFormat.EMAIL),
        "website": ValidationRule(required=False, format=FieldFormat.URL),
    }
)
"""Rules for the platform's common field kinds, keyed by field kind."""
