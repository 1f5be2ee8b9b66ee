"""Locale registry: the ordered, immutable set of supported locales.

Every resolver and validator call walks locales in registry order, so the
registry is built once at process start and never mutated afterwards.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from localefield.constants import SUPPORTED_LOCALES
from localefield.diagnostics import ConfigError, ErrorTemplate
from localefield.locale_utils import locale_display_name
from localefield.types import LocaleCode

__all__ = [
    "LocaleRegistry",
    "LocaleSpec",
    "default_registry",
]


@dataclass(frozen=True, slots=True)
class LocaleSpec:
    """One supported locale.

    Attributes:
        code: Locale code (e.g., 'zh-CN')
        is_default: True for the single authoritative fallback locale
        title: Editor-facing label; derived from CLDR when None
    """

    code: LocaleCode
    is_default: bool = False
    title: str | None = None


class LocaleRegistry:
    """Ordered set of supported locales with exactly one default.

    Read-only after construction and safe to share across threads without
    synchronization.

    Example:
        >>> registry = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")
        >>> registry.default_locale
        'zh-CN'
        >>> registry.locales
        ('zh-CN', 'en', 'ja')
        >>> "en" in registry
        True

    Attributes:
        specs: Immutable tuple of LocaleSpec in registry order
    """

    __slots__ = ("_default", "_index", "_locales", "_specs")

    def __init__(self, specs: Iterable[LocaleSpec]) -> None:
        """Build and validate a registry.

        Args:
            specs: Locale specs in the order resolution should scan them

        Raises:
            ConfigError: If the set is empty, holds duplicate or malformed
                codes, or does not flag exactly one default locale
        """
        spec_list = tuple(specs)
        if not spec_list:
            raise ConfigError(ErrorTemplate.empty_locale_set())

        index: dict[LocaleCode, int] = {}
        for position, spec in enumerate(spec_list):
            code = spec.code
            if not isinstance(code, str) or not code or code.strip() != code:
                raise ConfigError(ErrorTemplate.invalid_locale_code(code))
            if code in index:
                raise ConfigError(ErrorTemplate.duplicate_locale(code))
            index[code] = position

        defaults = [spec.code for spec in spec_list if spec.is_default]
        match defaults:
            case [default]:
                self._default: LocaleCode = default
            case []:
                raise ConfigError(ErrorTemplate.no_default_locale(index))
            case _:
                raise ConfigError(ErrorTemplate.multiple_default_locales(defaults))

        self._specs: tuple[LocaleSpec, ...] = spec_list
        self._locales: tuple[LocaleCode, ...] = tuple(index)
        self._index: dict[LocaleCode, int] = index

    @classmethod
    def from_codes(cls, codes: Iterable[LocaleCode], *, default: LocaleCode) -> LocaleRegistry:
        """Build a registry from plain locale codes.

        Args:
            codes: Locale codes in registry order
            default: Code of the default locale (must be among codes)

        Raises:
            ConfigError: If default is not among codes, or on any constructor error
        """
        code_list = list(codes)
        if code_list and default not in code_list:
            raise ConfigError(ErrorTemplate.unknown_locale(default, code_list))
        return cls(LocaleSpec(code, is_default=(code == default)) for code in code_list)

    @property
    def specs(self) -> tuple[LocaleSpec, ...]:
        """Locale specs in registry order."""
        return self._specs

    @property
    def locales(self) -> tuple[LocaleCode, ...]:
        """Locale codes in registry order."""
        return self._locales

    @property
    def default_locale(self) -> LocaleCode:
        """The single default locale."""
        return self._default

    @property
    def non_default_locales(self) -> tuple[LocaleCode, ...]:
        """Locale codes other than the default, in registry order."""
        return tuple(code for code in self._locales if code != self._default)

    def index(self, locale: LocaleCode) -> int:
        """Position of a locale in registry order.

        Raises:
            ConfigError: If the locale is not registered
        """
        try:
            return self._index[locale]
        except KeyError:
            raise ConfigError(ErrorTemplate.unknown_locale(locale, self._locales)) from None

    def display_name(self, locale: LocaleCode) -> str:
        """Editor-facing label for a locale.

        Uses the configured title when present, else the CLDR name.

        Raises:
            ConfigError: If the locale is not registered
        """
        spec = self._specs[self.index(locale)]
        if spec.title:
            return spec.title
        return locale_display_name(locale)

    def __contains__(self, locale: object) -> bool:
        return locale in self._index

    def __iter__(self) -> Iterator[LocaleCode]:
        return iter(self._locales)

    def __len__(self) -> int:
        return len(self._locales)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocaleRegistry):
            return NotImplemented
        return self._specs == other._specs

    def __hash__(self) -> int:
        return hash(self._specs)

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> LocaleRegistry.from_codes(["zh-CN", "en"], default="zh-CN")
            LocaleRegistry(locales=('zh-CN', 'en'), default='zh-CN')
        """
        return f"LocaleRegistry(locales={self._locales!r}, default={self._default!r})"


@functools.cache
def default_registry() -> LocaleRegistry:
    """Process-wide registry of the platform's supported locales.

    Built once on first call from constants.SUPPORTED_LOCALES and reused for
    the lifetime of the process.
    """
    return LocaleRegistry(
        LocaleSpec(code, is_default=is_default, title=title)
        for code, title, is_default in SUPPORTED_LOCALES
    )
