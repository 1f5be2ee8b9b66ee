"""Record loading helpers for the storage boundary.

The engine works on records keyed by registry locale codes. The content
store keys localized objects differently (``zhCN`` for ``zh-CN``, sometimes
the POSIX ``zh_CN`` form), so records are normalized once at the boundary
before being resolved or audited.

Components:
    normalize_field - Re-key one localized field to registry codes
    normalize_record - Re-key every localized field of a stored document
    RecordLoader - Protocol for fetching stored documents (structural typing)
    PathRecordLoader - JSON file loader with path-traversal prevention

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from localefield.locale_utils import normalize_locale, storage_key
from localefield.locales import LocaleRegistry, default_registry
from localefield.types import FieldName, LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Normalization
    "normalize_field",
    "normalize_record",
    # Loaders
    "RecordLoader",
    "PathRecordLoader",
]

logger = logging.getLogger(__name__)


def _alias_table(registry: LocaleRegistry) -> dict[str, LocaleCode]:
    """Map every accepted storage spelling of a locale to its registry code."""
    aliases: dict[str, LocaleCode] = {}
    for code in registry:
        aliases.setdefault(storage_key(code), code)
        aliases.setdefault(normalize_locale(code), code)
    for code in registry:
        aliases[code] = code
    return aliases


def normalize_field(
    raw: Mapping[str, object],
    *,
    registry: LocaleRegistry | None = None,
) -> dict[LocaleCode, object]:
    """Re-key a stored localized field to registry locale codes.

    Keys are matched against each registered code, its storage key
    (``zhCN``) and its POSIX form (``zh_CN``). When a stored object carries
    both the exact code and an alias, the exact code wins. Keys matching no
    registered locale are dropped.

    Example:
        >>> normalize_field({"zhCN": "芯片", "en": "Chip", "_type": "localeString"})
        {'zh-CN': '芯片', 'en': 'Chip'}
    """
    registry = registry if registry is not None else default_registry()
    aliases = _alias_table(registry)

    exact: dict[LocaleCode, object] = {}
    aliased: dict[LocaleCode, object] = {}
    for key, value in raw.items():
        code = aliases.get(key) if isinstance(key, str) else None
        if code is None:
            logger.debug("Dropping unknown locale key %r", key)
            continue
        if key == code:
            exact[code] = value
        else:
            aliased.setdefault(code, value)

    merged = aliased | exact
    return {code: merged[code] for code in registry if code in merged}


def _is_localized(raw: Mapping[str, object], aliases: Mapping[str, LocaleCode]) -> bool:
    return any(isinstance(key, str) and key in aliases for key in raw)


def normalize_record(
    raw: Mapping[str, object],
    *,
    registry: LocaleRegistry | None = None,
) -> dict[FieldName, object]:
    """Re-key every localized field of a stored document.

    A mapping whose keys include a locale spelling is treated as a localized
    field. A mapping without locale keys (an SEO object, say) is walked one
    level down: its mapping values are normalized and its other values (an
    image reference) are kept as stored. Top-level scalars such as ids and
    slugs are not localized and are left out.

    Example:
        >>> normalize_record({
        ...     "_id": "product-1",
        ...     "name": {"zhCN": "芯片", "en": "Chip"},
        ...     "seo": {"title": {"zhCN": "芯片"}, "ogImage": "img-1"},
        ... })
        {'name': {'zh-CN': '芯片', 'en': 'Chip'}, 'seo': {'title': {'zh-CN': '芯片'}, 'ogImage': 'img-1'}}
    """
    registry = registry if registry is not None else default_registry()
    aliases = _alias_table(registry)
    record: dict[FieldName, object] = {}

    for name, value in raw.items():
        if not isinstance(value, Mapping):
            continue
        if _is_localized(value, aliases):
            record[name] = normalize_field(value, registry=registry)
            continue
        record[name] = {
            key: (
                normalize_field(inner, registry=registry)
                if isinstance(inner, Mapping)
                else inner
            )
            for key, inner in value.items()
        }

    return record


class RecordLoader(Protocol):
    """Protocol for loading stored content documents.

    Implementations return the document as stored (not yet normalized).

    Example:
        >>> class MemoryLoader:
        ...     def __init__(self, docs: dict[str, dict[str, object]]) -> None:
        ...         self._docs = docs
        ...     def load(self, record_id: str) -> dict[str, object]:
        ...         return self._docs[record_id]
    """

    def load(self, record_id: str) -> Mapping[str, object]:
        """Load one stored document.

        Raises:
            FileNotFoundError: If the record does not exist
            OSError: If the record cannot be read
            ValueError: If the record is malformed
        """


@dataclass(frozen=True, slots=True)
class PathRecordLoader:
    """File system record loader using a path template.

    Implements RecordLoader for JSON documents exported from the content
    store. Uses a {record_id} placeholder in the path template.

    Security:
        Record ids containing path separators or ".." are rejected, and the
        resolved path must stay inside the template's static directory.

    Example:
        >>> loader = PathRecordLoader("exports/{record_id}.json")
        >>> doc = loader.load("product-1")
        # Loads from: exports/product-1.json

    Attributes:
        base_path: Path template with {record_id} placeholder
    """

    base_path: str
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {record_id} placeholder
        """
        if "{record_id}" not in self.base_path:
            msg = (
                "base_path must contain '{record_id}' placeholder, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        static_prefix = self.base_path.split("{record_id}")[0]
        static_dir = Path(static_prefix) if static_prefix.endswith(("/", "\\")) else (
            Path(static_prefix).parent
        )
        object.__setattr__(self, "_resolved_root", static_dir.resolve())

    @staticmethod
    def _validate_record_id(record_id: str) -> None:
        """Reject record ids that could escape the root directory.

        Raises:
            ValueError: If record_id is empty, padded, or contains path components
        """
        if not record_id or record_id.strip() != record_id:
            msg = f"Invalid record id: {record_id!r}"
            raise ValueError(msg)
        if ".." in record_id:
            msg = f"Path traversal sequences not allowed in record id: '{record_id}'"
            raise ValueError(msg)
        if "/" in record_id or "\\" in record_id:
            msg = f"Path separators not allowed in record id: '{record_id}'"
            raise ValueError(msg)

    def describe_path(self, record_id: str) -> str:
        """Return human-readable path for diagnostics."""
        return self.base_path.replace("{record_id}", record_id)

    def load(self, record_id: str) -> Mapping[str, object]:
        """Load and parse one JSON document.

        Raises:
            ValueError: If record_id is unsafe, the path escapes the root
                directory, or the file is not a JSON object
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        self._validate_record_id(record_id)
        full_path = Path(self.describe_path(record_id)).resolve()

        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: resolved path escapes root directory: '{record_id}'"
            raise ValueError(msg) from None

        data = json.loads(full_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            msg = f"Record '{record_id}' must be a JSON object, got {type(data).__name__}"
            raise ValueError(msg)
        logger.debug("Loaded record %s from %s", record_id, full_path)
        return data
