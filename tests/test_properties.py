"""Property-based tests for parser invariants using Hypothesis.

These tests verify that certain properties always hold regardless of the
input: order preservation, totality of the codec and projector, and that
the parser either returns a valid document or raises a ParseError.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from ssmlite import parse
from ssmlite.entities import decode_entities
from ssmlite.errors import ParseError
from ssmlite.nodes import Attribute, Element, Text
from ssmlite.text import extract_text

names = st.from_regex(r"[A-Za-z_][A-Za-z0-9_:]{0,8}", fullmatch=True)
values = st.text(
    alphabet=st.characters(exclude_characters='"<>', exclude_categories=("Cs",)),
    max_size=12,
)
# Text that starts and ends with a non-space character and holds no markup
words = st.from_regex(r"[A-Za-z0-9.,!?]([A-Za-z0-9 .,!?]{0,10}[A-Za-z0-9.,!?])?", fullmatch=True)


@st.composite
def elements(draw: st.DrawFn, depth: int = 0) -> tuple[str, Element]:
    """Draw (markup, expected tree) pairs with entity-free text."""
    name = draw(names)
    attrs = draw(st.lists(st.tuples(names, values), max_size=4))
    attributes = tuple(Attribute(n, v) for n, v in attrs)
    attr_markup = "".join(f' {n}="{v}"' for n, v in attrs)

    if depth >= 3 or draw(st.booleans()):
        return f"<{name}{attr_markup}/>", Element(name, attributes)

    parts: list[str] = []
    children: list[Text | Element] = []
    for kind in draw(st.lists(st.sampled_from(["text", "element"]), max_size=4)):
        if kind == "text" and not (children and isinstance(children[-1], Text)):
            word = draw(words)
            parts.append(word)
            children.append(Text(word))
        elif kind == "element":
            markup, child = draw(elements(depth + 1))
            parts.append(markup)
            children.append(child)
    return (
        f"<{name}{attr_markup}>{''.join(parts)}</{name}>",
        Element(name, attributes, tuple(children)),
    )


@st.composite
def documents(draw: st.DrawFn) -> tuple[str, Element]:
    markup, tree = draw(elements())
    return f"<speak>{markup}</speak>", Element("speak", (), (tree,))


class TestStructureProperties:
    @given(documents())
    @settings(max_examples=200)
    def test_parse_reproduces_generated_tree(self, case: tuple[str, Element]) -> None:
        """Children and attributes come back in source order."""
        markup, expected = case
        assert parse(markup) == expected

    @given(st.lists(st.tuples(names, values), max_size=6))
    def test_attribute_order_preserved(self, attrs: list[tuple[str, str]]) -> None:
        markup = "".join(f' {n}="{v}"' for n, v in attrs)
        doc = parse(f"<speak{markup}/>")
        assert doc.attributes == tuple(Attribute(n, v) for n, v in attrs)

    @given(st.text(max_size=200))
    @settings(max_examples=300)
    def test_parse_returns_root_or_raises_parse_error(self, source: str) -> None:
        try:
            doc = parse(source)
        except ParseError:
            return
        assert isinstance(doc, Element)
        assert doc.name == "speak"


class TestCodecProperties:
    @given(st.text())
    def test_decode_is_total(self, text: str) -> None:
        assert isinstance(decode_entities(text), str)

    @given(st.text(alphabet=st.characters(exclude_characters="&")))
    def test_text_without_ampersand_unchanged(self, text: str) -> None:
        assert decode_entities(text) == text

    @given(st.text(alphabet=st.sampled_from(["a", " ", "<", ">", "&"]), max_size=30))
    def test_escaped_text_decodes_to_original(self, text: str) -> None:
        escaped = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        assert decode_entities(escaped) == text

    @given(documents())
    @settings(max_examples=100)
    def test_projection_matches_leaf_concatenation(self, case: tuple[str, Element]) -> None:
        markup, expected = case

        def leaves(node: Text | Element) -> str:
            if isinstance(node, Text):
                return node.content
            return "".join(leaves(child) for child in node.children)

        assert extract_text(parse(markup)) == leaves(expected)
