"""Format checks for validated field values.

Each checker is a pure predicate over one string. None of them raise: a
value that cannot be parsed is simply reported as not matching.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Callable
from urllib.parse import urlsplit

from localefield.constants import PHONE_MIN_CHARACTERS
from localefield.enums import FieldFormat

__all__ = [
    "is_balanced_html",
    "is_email",
    "is_phone",
    "is_url",
    "matches_format",
]

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_PATTERN = re.compile(rf"\+?[\d\s\-()]{{{PHONE_MIN_CHARACTERS},}}")
_WHITESPACE = re.compile(r"\s")

# Tag names start with a letter; comments, doctypes and stray '<' are ignored.
_OPEN_TAG = re.compile(r"<[A-Za-z][^<>]*>")
_CLOSE_TAG = re.compile(r"</[A-Za-z][^<>]*>")


def is_email(value: str) -> bool:
    """Check local@domain.tld shape: one '@', a '.' after it, no whitespace.

    Example:
        >>> is_email("sales@example.com")
        True
        >>> is_email("sales@example")
        False
    """
    return _EMAIL_PATTERN.fullmatch(value) is not None


def is_url(value: str) -> bool:
    """Check that value is an absolute URI with scheme and authority.

    Example:
        >>> is_url("https://example.com/chips")
        True
        >>> is_url("not-a-url")
        False
    """
    if _WHITESPACE.search(value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)


def is_phone(value: str) -> bool:
    """Check digits, spaces, hyphens and parentheses, optional leading '+'.

    At least PHONE_MIN_CHARACTERS of those characters are required.

    Example:
        >>> is_phone("+86 (21) 5555-0100")
        True
        >>> is_phone("555-0100")
        False
    """
    return _PHONE_PATTERN.fullmatch(value) is not None


def is_balanced_html(value: str) -> bool:
    """Check that opening and closing tag counts are equal.

    Self-closing tags (``<br/>``) are not counted. Nesting order is not
    checked: this is a balance check, not HTML validation.

    Example:
        >>> is_balanced_html("<p>Chip <b>A</b></p>")
        True
        >>> is_balanced_html("<p>Chip <b>A</p>")
        False
    """
    opening = sum(1 for tag in _OPEN_TAG.findall(value) if not tag.endswith("/>"))
    closing = len(_CLOSE_TAG.findall(value))
    return opening == closing


_CHECKERS: dict[FieldFormat, Callable[[str], bool]] = {
    FieldFormat.EMAIL: is_email,
    FieldFormat.URL: is_url,
    FieldFormat.PHONE: is_phone,
    FieldFormat.HTML_BALANCED: is_balanced_html,
}


def matches_format(value: str, field_format: FieldFormat) -> bool:
    """Dispatch to the checker for field_format."""
    return _CHECKERS[field_format](value)
