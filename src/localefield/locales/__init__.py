"""Locale registry package.

Python 3.13+.
"""

from .registry import LocaleRegistry, LocaleSpec, default_registry

__all__ = ["LocaleRegistry", "LocaleSpec", "default_registry"]
