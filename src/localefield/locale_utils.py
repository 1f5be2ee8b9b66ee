"""Locale utilities for code normalization and CLDR display names.

Centralizes locale format conversion used at the storage boundary and the
Babel lookups used for human-readable locale labels.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "locale_display_name",
    "normalize_locale",
    "storage_key",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (zh-CN), while Babel/POSIX uses underscores (zh_CN).

    Args:
        locale_code: BCP-47 locale code (e.g., "zh-CN", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "zh_CN", "pt_BR")

    Example:
        >>> normalize_locale("zh-CN")
        'zh_CN'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.replace("-", "_")


def storage_key(locale_code: str) -> str:
    """Return the key a CMS document uses for a locale.

    The content store keys localized objects by the locale code with
    separators removed, because its field names cannot contain hyphens.

    Example:
        >>> storage_key("zh-CN")
        'zhCN'
        >>> storage_key("ja")
        'ja'
    """
    return locale_code.replace("-", "").replace("_", "")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def locale_display_name(locale_code: str) -> str:
    """Get the CLDR display name of a locale in its own language.

    Falls back to the code itself (with a warning logged) when Babel does
    not recognize the locale.

    Example:
        >>> locale_display_name("de")
        'Deutsch'
        >>> locale_display_name("xx-UNKNOWN")
        'xx-UNKNOWN'
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    try:
        name = get_babel_locale(locale_code).get_display_name()
    except UnknownLocaleError as e:
        logger.warning("Unknown locale '%s': %s. Using code as display name", locale_code, e)
        return locale_code
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Using code as display name", locale_code, e
        )
        return locale_code
    return name or locale_code
