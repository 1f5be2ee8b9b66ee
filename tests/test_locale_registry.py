"""Tests for locales/registry.py: LocaleRegistry construction and queries.

Covers:
- Valid construction, ordering, default selection
- ConfigError for empty, duplicate, malformed, and default-less sets
- from_codes() convenience constructor
- index(), display_name(), container protocol, value semantics
- default_registry() platform catalogue

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given

from localefield.constants import DEFAULT_LOCALE, SUPPORTED_LOCALES
from localefield.diagnostics import ConfigError, DiagnosticCode
from localefield.locales import LocaleRegistry, LocaleSpec, default_registry
from tests.strategies import locale_registries


class TestLocaleRegistryConstruction:
    """Valid registries keep the configured order and default."""

    def test_order_is_preserved(self, registry: LocaleRegistry) -> None:
        """Locales iterate in the order they were configured."""
        assert registry.locales == ("zh-CN", "en", "ja")
        assert list(registry) == ["zh-CN", "en", "ja"]

    def test_default_locale(self, registry: LocaleRegistry) -> None:
        """The single flagged locale is the default."""
        assert registry.default_locale == "zh-CN"
        assert registry.non_default_locales == ("en", "ja")

    def test_default_need_not_be_first(self) -> None:
        """The default may sit anywhere in the order."""
        reg = LocaleRegistry([LocaleSpec("en"), LocaleSpec("de", is_default=True)])
        assert reg.default_locale == "de"
        assert reg.locales == ("en", "de")

    def test_single_locale(self) -> None:
        """A one-locale set is valid when that locale is the default."""
        reg = LocaleRegistry([LocaleSpec("en", is_default=True)])
        assert len(reg) == 1
        assert reg.non_default_locales == ()

    def test_accepts_generator(self) -> None:
        """Specs may be supplied lazily."""
        reg = LocaleRegistry(
            LocaleSpec(code, is_default=(code == "ja")) for code in ("ja", "ko")
        )
        assert reg.locales == ("ja", "ko")


class TestLocaleRegistryErrors:
    """Invalid locale sets raise ConfigError with a diagnostic code."""

    def test_empty_set(self) -> None:
        """An empty set is rejected."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry([])
        assert exc_info.value.code is DiagnosticCode.EMPTY_LOCALE_SET

    def test_no_default(self) -> None:
        """A set without a default is rejected."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry([LocaleSpec("en"), LocaleSpec("ja")])
        assert exc_info.value.code is DiagnosticCode.NO_DEFAULT_LOCALE
        assert "en, ja" in str(exc_info.value)

    def test_multiple_defaults(self) -> None:
        """Two defaults are rejected and both are named."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry(
                [LocaleSpec("en", is_default=True), LocaleSpec("ja", is_default=True)]
            )
        assert exc_info.value.code is DiagnosticCode.MULTIPLE_DEFAULT_LOCALES
        assert "en, ja" in str(exc_info.value)

    def test_duplicate_code(self) -> None:
        """A repeated code is rejected even when flags differ."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry([LocaleSpec("en", is_default=True), LocaleSpec("en")])
        assert exc_info.value.code is DiagnosticCode.DUPLICATE_LOCALE
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.locale_code == "en"

    @pytest.mark.parametrize("code", ["", " en", "en ", None, 42])
    def test_malformed_code(self, code: object) -> None:
        """Empty, padded, and non-string codes are rejected."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry([LocaleSpec(code, is_default=True)])  # type: ignore[arg-type]
        assert exc_info.value.code is DiagnosticCode.INVALID_LOCALE_CODE

    def test_duplicate_checked_before_default_count(self) -> None:
        """Duplicate codes are reported even when the default count is also wrong."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry([LocaleSpec("en"), LocaleSpec("en")])
        assert exc_info.value.code is DiagnosticCode.DUPLICATE_LOCALE


class TestFromCodes:
    """LocaleRegistry.from_codes() convenience constructor."""

    def test_builds_registry(self) -> None:
        reg = LocaleRegistry.from_codes(["zh-CN", "en", "ja"], default="zh-CN")
        assert reg.locales == ("zh-CN", "en", "ja")
        assert reg.default_locale == "zh-CN"

    def test_unknown_default(self) -> None:
        """A default outside the codes is an UNKNOWN_LOCALE error."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry.from_codes(["en", "ja"], default="de")
        assert exc_info.value.code is DiagnosticCode.UNKNOWN_LOCALE

    def test_empty_codes(self) -> None:
        """No codes at all is still an empty-set error."""
        with pytest.raises(ConfigError) as exc_info:
            LocaleRegistry.from_codes([], default="en")
        assert exc_info.value.code is DiagnosticCode.EMPTY_LOCALE_SET


class TestLocaleRegistryQueries:
    """index(), membership, and display names."""

    def test_index(self, registry: LocaleRegistry) -> None:
        assert registry.index("zh-CN") == 0
        assert registry.index("ja") == 2

    def test_index_unknown_locale(self, registry: LocaleRegistry) -> None:
        """index() of an unregistered locale raises ConfigError."""
        with pytest.raises(ConfigError) as exc_info:
            registry.index("fr")
        assert exc_info.value.code is DiagnosticCode.UNKNOWN_LOCALE
        assert "zh-CN, en, ja" in str(exc_info.value)

    def test_contains(self, registry: LocaleRegistry) -> None:
        assert "en" in registry
        assert "fr" not in registry
        assert None not in registry

    def test_display_name_prefers_title(self) -> None:
        """A configured title wins over CLDR data."""
        reg = LocaleRegistry([LocaleSpec("zh-CN", is_default=True, title="简体中文")])
        assert reg.display_name("zh-CN") == "简体中文"

    def test_display_name_from_cldr(self) -> None:
        """Without a title the CLDR native name is used."""
        reg = LocaleRegistry([LocaleSpec("de", is_default=True)])
        assert reg.display_name("de") == "Deutsch"

    def test_display_name_unknown_locale(self, registry: LocaleRegistry) -> None:
        with pytest.raises(ConfigError):
            registry.display_name("fr")


class TestLocaleRegistryValueSemantics:
    """Equality, hashing, and repr."""

    def test_equal_registries(self) -> None:
        a = LocaleRegistry.from_codes(["zh-CN", "en"], default="zh-CN")
        b = LocaleRegistry.from_codes(["zh-CN", "en"], default="zh-CN")
        assert a == b
        assert hash(a) == hash(b)

    def test_order_matters(self) -> None:
        """Registries with the same codes in a different order differ."""
        a = LocaleRegistry.from_codes(["zh-CN", "en"], default="zh-CN")
        b = LocaleRegistry.from_codes(["en", "zh-CN"], default="zh-CN")
        assert a != b

    def test_not_equal_to_other_types(self, registry: LocaleRegistry) -> None:
        assert registry != ("zh-CN", "en", "ja")

    def test_repr(self, registry: LocaleRegistry) -> None:
        assert repr(registry) == "LocaleRegistry(locales=('zh-CN', 'en', 'ja'), default='zh-CN')"

    def test_registry_is_read_only(self, registry: LocaleRegistry) -> None:
        """Slots without setters: new attributes cannot be attached."""
        with pytest.raises(AttributeError):
            registry.extra = 1  # type: ignore[attr-defined]


class TestDefaultRegistry:
    """The platform's process-wide registry."""

    def test_matches_supported_locales(self) -> None:
        reg = default_registry()
        assert reg.locales == tuple(code for code, _, _ in SUPPORTED_LOCALES)
        assert reg.default_locale == DEFAULT_LOCALE

    def test_default_constant_follows_catalogue_flag(self) -> None:
        flagged = [code for code, _, is_default in SUPPORTED_LOCALES if is_default]
        assert flagged == [DEFAULT_LOCALE] == ["zh-CN"]

    def test_cached(self) -> None:
        """Every call returns the same instance."""
        assert default_registry() is default_registry()

    def test_titles_configured(self) -> None:
        assert default_registry().display_name("ja") == "日本語"


class TestLocaleRegistryProperties:
    """Property-based invariants over generated registries."""

    @given(reg=locale_registries())
    def test_exactly_one_default(self, reg: LocaleRegistry) -> None:
        """PROPERTY: default is registered and excluded from non-defaults."""
        assert reg.default_locale in reg
        assert reg.default_locale not in reg.non_default_locales
        assert len(reg.non_default_locales) == len(reg) - 1
        event(f"default_index={reg.index(reg.default_locale)}")

    @given(reg=locale_registries())
    def test_index_matches_iteration(self, reg: LocaleRegistry) -> None:
        """PROPERTY: index() agrees with iteration order."""
        for position, code in enumerate(reg):
            assert reg.index(code) == position
