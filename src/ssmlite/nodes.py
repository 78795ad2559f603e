"""Typed tree nodes for ssmlite.

All nodes are frozen dataclasses with slots for:
- Immutability: a parsed tree is never modified; decoding builds a new one
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: ``match node: case Text(): ... case Element(): ...``

Node Hierarchy:
Node = Text | Element
├── Text       character content, no children
└── Element    name, ordered attributes, ordered children

A Document is simply the root Element returned by a successful parse.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Attribute:
    """A ``name="value"`` pair in declaration order.

    The value is the raw text between the quotes; entities inside it are
    never decoded.

    """

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class Text:
    """Character content between tags.

    Surrounding whitespace is preserved verbatim.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Element:
    """A tagged node.

    SSML: <prosody rate="slow">text</prosody> or <break time="1s"/>

    Attribute names are not required to be unique; duplicates are kept in
    source order.

    """

    name: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Node, ...] = ()

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of the first attribute called ``name``."""
        for attr in self.attributes:
            if attr.name == name:
                return attr.value
        return default

    def get_all(self, name: str) -> list[str]:
        """Return every value declared for ``name``, in source order."""
        return [attr.value for attr in self.attributes if attr.name == name]


type Node = Text | Element
