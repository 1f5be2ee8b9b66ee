"""Translation quality validation package.

Submodules:
    rules   - ValidationRule descriptor, preset catalogue, option-bag parsing
    formats - email/url/phone/html balance predicates
    engine  - validate_field(): one field against one rule
    audit   - audit_record(), translation_stats(), locale_completion(),
              deduplicate_issues()

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .audit import audit_record, deduplicate_issues, locale_completion, translation_stats
from .engine import is_translated, validate_field
from .formats import is_balanced_html, is_email, is_phone, is_url, matches_format
from .rules import PRESET_RULES, ValidationRule, check_rule, rule_from_mapping, with_placeholders

__all__ = [
    # Rules
    "ValidationRule",
    "PRESET_RULES",
    "check_rule",
    "rule_from_mapping",
    "with_placeholders",
    # Rule engine
    "validate_field",
    "is_translated",
    # Aggregation
    "audit_record",
    "deduplicate_issues",
    "locale_completion",
    "translation_stats",
    # Format predicates
    "matches_format",
    "is_email",
    "is_url",
    "is_phone",
    "is_balanced_html",
]
