"""Extract plain text from ssmlite tree nodes.

The text projection of an element is the concatenation of its text leaves
in document order; tag names and attributes contribute nothing.

Example:
    >>> from ssmlite import parse, extract_text
    >>> doc = parse('<speak>Hello <break time="1s"/><emphasis>world</emphasis></speak>')
    >>> extract_text(doc)
    'Hello world'

Note:
    Entities are decoded at every leaf, unconditionally. ``parse()`` already
    returns decoded text, so a literal ``&lt;`` that survived decoding (from
    ``&amp;lt;`` in the source) is decoded once more here into ``<``. Use
    ``Parser.parse_raw()`` when exactly one round of decoding is wanted.
"""

from ssmlite.entities import decode_entities
from ssmlite.nodes import Element, Node, Text


def extract_text(node: Node) -> str:
    """Extract plain text from any node.

    Args:
        node: Text or Element, decoded or not.

    Returns:
        Concatenated, entity-decoded text of the node and its descendants.

    """
    match node:
        case Text(content=content):
            return decode_entities(content)
        case Element(children=children):
            return "".join(extract_text(child) for child in children)
        case _:
            return ""
