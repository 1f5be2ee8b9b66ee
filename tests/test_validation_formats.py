"""Tests for validation/formats.py format predicates.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localefield.enums import FieldFormat
from localefield.validation import (
    is_balanced_html,
    is_email,
    is_phone,
    is_url,
    matches_format,
)


class TestIsEmail:
    @pytest.mark.parametrize(
        "value",
        ["sales@example.com", "a.b+c@mail.example.co.uk", "销售@例子.中国"],
    )
    def test_valid(self, value: str) -> None:
        assert is_email(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "sales",
            "sales@example",
            "sales@@example.com",
            "sales @example.com",
            "sales@example.com ",
            "@example.com",
            "a@b@c.com",
        ],
    )
    def test_invalid(self, value: str) -> None:
        assert is_email(value) is False


class TestIsUrl:
    @pytest.mark.parametrize(
        "value",
        [
            "https://example.com",
            "http://example.com/chips?id=1#spec",
            "ftp://files.example.com/a.pdf",
            "https://[::1]:8080/",
        ],
    )
    def test_valid(self, value: str) -> None:
        assert is_url(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not-a-url",
            "example.com",
            "/relative/path",
            "mailto:sales@example.com",
            "https://exa mple.com",
            "http://[::1",
        ],
    )
    def test_invalid(self, value: str) -> None:
        assert is_url(value) is False


class TestIsPhone:
    @pytest.mark.parametrize(
        "value",
        ["+86 (21) 5555-0100", "0123456789", "+1 555 010 0100", "(010) 1234-5678"],
    )
    def test_valid(self, value: str) -> None:
        assert is_phone(value) is True

    @pytest.mark.parametrize(
        "value",
        ["", "555-0100", "+86 21 5555 ext 1", "123456789", "++8612345678901", "phone"],
    )
    def test_invalid(self, value: str) -> None:
        assert is_phone(value) is False


class TestIsBalancedHtml:
    @pytest.mark.parametrize(
        "value",
        [
            "",
            "plain text",
            "<p>Chip <b>A</b></p>",
            "<p>line<br/>break</p>",
            '<a href="/x">link</a>',
            "1 < 2 and 3 > 2",
            "<!-- comment --><p></p>",
        ],
    )
    def test_balanced(self, value: str) -> None:
        assert is_balanced_html(value) is True

    @pytest.mark.parametrize(
        "value",
        ["<p>Chip <b>A</p>", "</p>", "<div><div></div>"],
    )
    def test_unbalanced(self, value: str) -> None:
        assert is_balanced_html(value) is False

    def test_order_not_checked(self) -> None:
        """Counting only: misnested tags still balance."""
        assert is_balanced_html("<b><i>x</b></i>") is True

    @given(depth=st.integers(min_value=0, max_value=20), tag=st.sampled_from(["p", "b", "div"]))
    def test_nested_tags_balance(self, depth: int, tag: str) -> None:
        """PROPERTY: n opening tags followed by n closing tags are balanced."""
        value = f"<{tag}>" * depth + "text" + f"</{tag}>" * depth
        assert is_balanced_html(value) is True
        assert is_balanced_html(value + f"<{tag}>") is False
        event(f"depth={min(depth, 5)}")


class TestMatchesFormat:
    @pytest.mark.parametrize(
        ("field_format", "value"),
        [
            (FieldFormat.EMAIL, "sales@example.com"),
            (FieldFormat.URL, "https://example.com"),
            (FieldFormat.PHONE, "+86 21 5555 0100"),
            (FieldFormat.HTML_BALANCED, "<p>x</p>"),
        ],
    )
    def test_dispatch(self, field_format: FieldFormat, value: str) -> None:
        assert matches_format(value, field_format) is True
        assert matches_format("<p>not valid", field_format) is False

    @given(value=st.text(max_size=40), field_format=st.sampled_from(list(FieldFormat)))
    def test_never_raises(self, value: str, field_format: FieldFormat) -> None:
        """PROPERTY: every checker returns a bool for any string."""
        assert isinstance(matches_format(value, field_format), bool)
        event(f"format={field_format}")
