"""Tests for entity decoding."""

from ssmlite.entities import ENTITIES, decode_entities


class TestDecodeEntities:
    def test_basic_entities(self) -> None:
        assert decode_entities("x &lt; y &gt; z") == "x < y > z"

    def test_ampersand(self) -> None:
        assert decode_entities("salt &amp; pepper") == "salt & pepper"

    def test_double_escaped_decodes_once(self) -> None:
        """&amp;lt; stands for a literal "&lt;" and must not become "<"."""
        assert decode_entities("a &amp;lt; b") == "a &lt; b"
        assert decode_entities("&amp;gt;") == "&gt;"
        assert decode_entities("&amp;amp;") == "&amp;"

    def test_unknown_references_pass_through(self) -> None:
        text = "&quot;hi&quot; &apos; &#60; &#x3C; &nbsp;"
        assert decode_entities(text) == text

    def test_bare_ampersand_unchanged(self) -> None:
        assert decode_entities("AT&T & co") == "AT&T & co"

    def test_no_entities_returns_same_text(self) -> None:
        assert decode_entities("plain text") == "plain text"
        assert decode_entities("") == ""

    def test_amp_is_replaced_last(self) -> None:
        assert [entity for entity, _ in ENTITIES][-1] == "&amp;"
