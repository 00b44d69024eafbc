"""Tests for HTML escaping helpers."""

from __future__ import annotations

import pytest

from metagen.utils import escape_html, unescape_html


class TestEscape:
    def test_all_five(self):
        assert escape_html("<a href=\"x\">Tom & 'Jerry'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; &#x27;Jerry&#x27;&lt;/a&gt;"
        )

    def test_plain_text_unchanged(self):
        assert escape_html("Hello, World!") == "Hello, World!"


class TestUnescape:
    def test_known_entities(self):
        assert unescape_html("&lt;p&gt;&amp;&quot;&#x27;&#39;&#x2F;&#x2f;") == "<p>&\"''//"

    def test_unknown_entities_left_alone(self):
        assert unescape_html("&nbsp;&copy;") == "&nbsp;&copy;"

    def test_single_pass(self):
        assert unescape_html("&amp;lt;") == "&lt;"

    @pytest.mark.parametrize(
        "text",
        ["&lt;", "a & b", "<script>alert('x')</script>", "&amp;quot;", ""],
    )
    def test_inverse_of_escape(self, text):
        assert unescape_html(escape_html(text)) == text
