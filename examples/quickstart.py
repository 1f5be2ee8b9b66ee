"""Quickstart example for localefield.

This example demonstrates resolving localized fields and auditing a content
record for translation gaps.

Note: Examples print reports for brevity. In production, feed Stats into
your reporting layer and log issues through the standard logging module.
"""

from localefield import (
    PRESET_RULES,
    LocaleRegistry,
    ValidationRule,
    audit_record,
    resolve_seo,
    resolve_text,
)
from localefield.diagnostics import DiagnosticFormatter, OutputFormat

registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")

# Example 1: Resolve a text field
print("=" * 50)
print("Example 1: Resolve a Text Field")
print("=" * 50)

name = {"zh-CN": "高性能芯片", "en": "High-performance chip", "ja": ""}

print(resolve_text(name, "en", registry=registry))
# Output: High-performance chip

print(resolve_text(name, "ja", registry=registry))
# Output: 高性能芯片 (ja is empty, default locale is used)

# Example 2: Scan fallback when the default is empty
print("\n" + "=" * 50)
print("Example 2: Scan Fallback")
print("=" * 50)

title = {"zh-CN": "", "en": "Chip A"}
print(resolve_text(title, "zh-CN", registry=registry))
# Output: Chip A (first non-empty locale in registry order)

# Example 3: SEO bundles resolve field by field
print("\n" + "=" * 50)
print("Example 3: SEO Bundle")
print("=" * 50)

seo = {
    "title": {"zh-CN": "芯片A", "en": "Chip A"},
    "description": {"zh-CN": "适用于工业控制的高性能芯片"},
    "keywords": {"en": ["chip", "industrial"]},
    "ogImage": "image-chip-a",
}
print(resolve_seo(seo, "en", registry=registry))
# Output: ResolvedSEO(title='Chip A', description='适用于工业控制的高性能芯片', ...)

# Example 4: Audit a record
print("\n" + "=" * 50)
print("Example 4: Audit a Record")
print("=" * 50)

record = {
    "name": name,
    "seoTitle": {"zh-CN": "芯片A", "en": "Chip A", "ja": "チップA"},
    "seoDescription": {"zh-CN": "短描述", "en": "Short"},
    "website": {"zh-CN": "not-a-url"},
}
rules = {
    "name": PRESET_RULES["product_name"],
    "seoTitle": PRESET_RULES["seo_title"],
    "seoDescription": PRESET_RULES["seo_description"],
    "website": ValidationRule(format="url"),  # type: ignore[arg-type]
}

stats = audit_record(record, rules, registry=registry)
print(DiagnosticFormatter().format_stats(stats))

# Example 5: Machine-readable report
print("\n" + "=" * 50)
print("Example 5: JSON Report")
print("=" * 50)

print(DiagnosticFormatter(output_format=OutputFormat.JSON).format_stats(stats))

# Example 6: Group issues for an editor view
print("\n" + "=" * 50)
print("Example 6: Issues by Locale")
print("=" * 50)

for locale, issues in stats.issues_by_locale(registry).items():
    print(f"{registry.display_name(locale)} ({locale}): {len(issues)} issue(s)")
