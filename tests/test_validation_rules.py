"""Tests for validation/rules.py: rule descriptors, checks, and presets.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from localefield.constants import (
    SEO_DESCRIPTION_MAX_LENGTH,
    SEO_DESCRIPTION_MIN_LENGTH,
    SEO_TITLE_MAX_LENGTH,
)
from localefield.diagnostics import ConfigError, DiagnosticCode
from localefield.enums import FieldFormat
from localefield.validation import (
    PRESET_RULES,
    ValidationRule,
    check_rule,
    rule_from_mapping,
    with_placeholders,
)


class TestValidationRuleCoercion:
    """__post_init__ normalizes convenience spellings."""

    def test_defaults(self) -> None:
        rule = ValidationRule()
        assert rule.required is False
        assert rule.min_length is None
        assert rule.max_length is None
        assert rule.length_deviation_threshold is None
        assert rule.required_placeholders == frozenset()
        assert rule.format is None

    def test_format_name_coerced(self) -> None:
        rule = ValidationRule(format="url")  # type: ignore[arg-type]
        assert rule.format is FieldFormat.URL

    def test_unknown_format_name_kept(self) -> None:
        """Unknown names survive construction and fail in check_rule()."""
        rule = ValidationRule(format="fax")  # type: ignore[arg-type]
        assert rule.format == "fax"

    def test_placeholders_from_list(self) -> None:
        rule = ValidationRule(required_placeholders=["{name}", "{name}"])  # type: ignore[arg-type]
        assert rule.required_placeholders == frozenset({"{name}"})

    def test_placeholder_from_string(self) -> None:
        """A single string is one token, not a set of characters."""
        rule = ValidationRule(required_placeholders="{count}")  # type: ignore[arg-type]
        assert rule.required_placeholders == frozenset({"{count}"})

    def test_frozen(self) -> None:
        rule = ValidationRule()
        with pytest.raises(AttributeError):
            rule.required = True  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(ValidationRule(required=True)) == hash(ValidationRule(required=True))


class TestCheckRule:
    """check_rule() rejects inconsistent rules with ConfigError."""

    @pytest.mark.parametrize(
        "rule",
        [
            ValidationRule(min_length=-1),
            ValidationRule(max_length=-5),
            ValidationRule(min_length=10, max_length=5),
            ValidationRule(length_deviation_threshold=1.5),
            ValidationRule(length_deviation_threshold=-0.1),
            ValidationRule(required_placeholders=frozenset({""})),
            ValidationRule(min_length="10"),  # type: ignore[arg-type]
            ValidationRule(max_length=True),
            ValidationRule(max_length=60.0),  # type: ignore[arg-type]
            ValidationRule(length_deviation_threshold="0.5"),  # type: ignore[arg-type]
            ValidationRule(length_deviation_threshold=True),
            ValidationRule(required_placeholders=frozenset({3})),  # type: ignore[arg-type]
        ],
    )
    def test_invalid_rule(self, rule: ValidationRule) -> None:
        with pytest.raises(ConfigError) as exc_info:
            check_rule(rule, "title")
        assert exc_info.value.code is DiagnosticCode.INVALID_RULE
        assert "for field 'title'" in str(exc_info.value)

    def test_unknown_format(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            check_rule(ValidationRule(format="fax"))  # type: ignore[arg-type]
        assert exc_info.value.code is DiagnosticCode.UNKNOWN_FORMAT
        assert "'fax'" in str(exc_info.value)

    @pytest.mark.parametrize(
        "rule",
        [
            ValidationRule(),
            ValidationRule(min_length=0, max_length=0),
            ValidationRule(min_length=5, max_length=5),
            ValidationRule(length_deviation_threshold=0.0),
            ValidationRule(length_deviation_threshold=1.0),
            ValidationRule(format=FieldFormat.EMAIL, required_placeholders=frozenset({"{x}"})),
        ],
    )
    def test_valid_rule(self, rule: ValidationRule) -> None:
        check_rule(rule)

    def test_message_without_field_name(self) -> None:
        with pytest.raises(ConfigError, match=r"Invalid validation rule: min_length \(3\)"):
            check_rule(ValidationRule(min_length=3, max_length=1))


class TestRuleFromMapping:
    """Option bags in stored (camelCase) and attribute (snake_case) spelling."""

    def test_camel_case(self) -> None:
        rule = rule_from_mapping(
            {
                "required": True,
                "minLength": 50,
                "maxLength": 160,
                "lengthDifferenceThreshold": 0.3,
                "requiredPlaceholders": ["{brand}"],
                "format": "url",
            }
        )
        assert rule == ValidationRule(
            required=True,
            min_length=50,
            max_length=160,
            length_deviation_threshold=0.3,
            required_placeholders=frozenset({"{brand}"}),
            format=FieldFormat.URL,
        )

    def test_snake_case(self) -> None:
        rule = rule_from_mapping({"max_length": 60, "required": 1})
        assert rule == ValidationRule(required=True, max_length=60)

    @pytest.mark.parametrize("name", ["html", "htmlBalanced", "html_balanced"])
    def test_html_format_aliases(self, name: str) -> None:
        assert rule_from_mapping({"format": name}).format is FieldFormat.HTML_BALANCED

    def test_null_placeholders(self) -> None:
        rule = rule_from_mapping({"requiredPlaceholders": None})
        assert rule.required_placeholders == frozenset()

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            rule_from_mapping({"maxLen": 60})
        assert exc_info.value.code is DiagnosticCode.UNKNOWN_RULE_OPTION

    @pytest.mark.parametrize("value", ["fax", 3])
    def test_unknown_format(self, value: object) -> None:
        with pytest.raises(ConfigError) as exc_info:
            rule_from_mapping({"format": value})
        assert exc_info.value.code is DiagnosticCode.UNKNOWN_FORMAT

    @pytest.mark.parametrize(
        "options",
        [
            {"minLength": "10"},
            {"maxLength": None, "minLength": 2.5},
            {"lengthDeviationThreshold": "0.5"},
            {"requiredPlaceholders": 5},
            {"requiredPlaceholders": [["{x}"]]},
            {"requiredPlaceholders": [1, 2]},
        ],
    )
    def test_wrongly_typed_value(self, options: dict[str, object]) -> None:
        """Wrongly typed option values are ConfigError, never a bare TypeError."""
        with pytest.raises(ConfigError) as exc_info:
            rule_from_mapping(options)
        assert exc_info.value.code is DiagnosticCode.INVALID_RULE

    def test_inconsistent_rule_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            rule_from_mapping({"minLength": 10, "maxLength": 2})
        assert exc_info.value.code is DiagnosticCode.INVALID_RULE

    def test_empty_mapping(self) -> None:
        assert rule_from_mapping({}) == ValidationRule()


class TestWithPlaceholders:
    def test_required_with_tokens(self) -> None:
        rule = with_placeholders("{name}", "{count}")
        assert rule.required is True
        assert rule.required_placeholders == frozenset({"{name}", "{count}"})


class TestPresetRules:
    """Preset catalogue for the platform's common field kinds."""

    def test_seo_title(self) -> None:
        rule = PRESET_RULES["seo_title"]
        assert rule.required is True
        assert rule.max_length == SEO_TITLE_MAX_LENGTH
        assert rule.length_deviation_threshold == 0.5

    def test_seo_description(self) -> None:
        rule = PRESET_RULES["seo_description"]
        assert rule.min_length == SEO_DESCRIPTION_MIN_LENGTH
        assert rule.max_length == SEO_DESCRIPTION_MAX_LENGTH
        assert rule.length_deviation_threshold == 0.3

    def test_contact_formats(self) -> None:
        assert PRESET_RULES["email"] == ValidationRule(required=True, format=FieldFormat.EMAIL)
        assert PRESET_RULES["website"] == ValidationRule(format=FieldFormat.URL)

    def test_brand_description_optional(self) -> None:
        assert PRESET_RULES["brand_description"].required is False

    def test_every_preset_is_valid(self) -> None:
        for name, rule in PRESET_RULES.items():
            check_rule(rule, name)

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            PRESET_RULES["custom"] = ValidationRule()  # type: ignore[index]
