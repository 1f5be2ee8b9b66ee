"""LocaleField Example - Fallback Chains and Stored Documents.

Demonstrates real-world usage of the resolver and auditor for handling
incomplete translations exported from a content store.

Scenarios covered:
1. Fallback tracking with on_fallback
2. Rich text and keyword fields
3. Loading and normalizing stored documents from disk
4. Per-locale completion ranking

Python 3.13+.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

from localefield import (
    FallbackInfo,
    LocaleRegistry,
    audit_record,
    available_locales,
    locale_completion,
    resolve_keywords,
    resolve_rich_text,
    resolve_text,
)
from localefield.loading import PathRecordLoader, normalize_record


def example_1_fallback_tracking() -> None:
    """Example 1: Record which fields fell back to another locale."""
    print("=" * 60)
    print("Example 1: Fallback Tracking")
    print("=" * 60)

    registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")
    fallbacks: list[FallbackInfo] = []

    product = {
        "name": {"zh-CN": "芯片A", "en": "Chip A", "ja": "チップA"},
        "tagline": {"zh-CN": "稳定可靠", "en": ""},
        "warranty": {"ja": "3年保証"},
    }

    for field_name, field in product.items():
        value = resolve_text(
            field, "en", registry=registry, field_name=field_name,
            on_fallback=fallbacks.append,
        )
        print(f"{field_name}: {value}")

    print("\nFallbacks:")
    for info in fallbacks:
        print(f"  {info.field_name}: requested {info.requested_locale}, "
              f"shown {info.resolved_locale}")


def example_2_rich_text_and_keywords() -> None:
    """Example 2: Block sequences and keyword lists."""
    print("\n" + "=" * 60)
    print("Example 2: Rich Text and Keywords")
    print("=" * 60)

    registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")

    body = {
        "zh-CN": [{"_type": "block", "text": "产品介绍"}],
        "en": [],
    }
    keywords = {"en": ["chip", "mcu"], "ja": ["チップ"]}

    print(resolve_rich_text(body, "en", registry=registry))
    print(resolve_keywords(keywords, "zh-CN", registry=registry))
    print(f"Body available in: {available_locales(body, registry=registry)}")


def example_3_stored_documents(tmp_path: Path) -> None:
    """Example 3: Load exported documents and audit them."""
    print("\n" + "=" * 60)
    print("Example 3: Stored Documents")
    print("=" * 60)

    # The content store keys locales without separators (zhCN, zhTW).
    document = {
        "_id": "product-1",
        "name": {"_type": "localeString", "zhCN": "芯片A", "en": "Chip A"},
        "description": {"_type": "localeText", "zhCN": "适用于工业控制", "zhTW": ""},
    }
    (tmp_path / "product-1.json").write_text(
        json.dumps(document, ensure_ascii=False), encoding="utf-8"
    )

    loader = PathRecordLoader(f"{tmp_path}/{{record_id}}.json")
    record = normalize_record(loader.load("product-1"))
    print(record)

    stats = audit_record(record)
    print(f"Completion: {stats.completion_percent:.1f}%")
    print(f"Issues: {len(stats.issues)}")


def example_4_completion_ranking() -> None:
    """Example 4: Which locale needs the most work."""
    print("\n" + "=" * 60)
    print("Example 4: Completion Ranking")
    print("=" * 60)

    registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja", "ko"], default="zh-CN")
    record = {
        "name": {"zh-CN": "芯片A", "en": "Chip A", "ja": "チップA"},
        "description": {"zh-CN": "描述", "en": "Description"},
        "tagline": {"zh-CN": "标语"},
    }
    for completion in locale_completion(record, registry=registry):
        print(f"{completion.locale}: {completion.rate:.0%}")


# Main execution
if __name__ == "__main__":
    example_1_fallback_tracking()
    example_2_rich_text_and_keywords()

    with tempfile.TemporaryDirectory() as tmp_dir_main:
        example_3_stored_documents(Path(tmp_dir_main))

    example_4_completion_ranking()

    print("\n" + "=" * 60)
    print("[SUCCESS] All examples complete!")
    print("=" * 60)
