"""
ssmlite: Small SSML Parser for Python

Parses the speech-synthesis markup subset (tags, double-quoted attributes,
self-closing tags, text, and the ``&lt;`` ``&gt;`` ``&amp;`` entities) into
an immutable typed tree, validating that the document is a single
``<speak>`` element. Zero runtime dependencies.

Quick Start:
    >>> from ssmlite import parse, extract_text
    >>> doc = parse('<speak>Hello <break time="500ms"/>world</speak>')
    >>> doc.children[1].get("time")
    '500ms'
    >>> extract_text(doc)
    'Hello world'

    >>> # Or use the high-level SSML class
    >>> from ssmlite import SSML
    >>> ssml = SSML(root_tag="speak", max_depth=64)
    >>> ssml("<speak>1 &lt; 2</speak>")
    '1 < 2'

Not supported: comments, CDATA, processing instructions, namespaces,
DOCTYPE, unquoted or single-quoted attribute values, and writing markup
back out.
"""

from collections.abc import Iterable

from ssmlite.attributes import lex_attributes
from ssmlite.config import (
    DEFAULT_ROOT_TAG,
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from ssmlite.entities import decode_entities
from ssmlite.errors import (
    AttributeFormatError,
    InvalidRootError,
    InvalidTagFormatError,
    NestingDepthError,
    ParseError,
    SSMLError,
    UnclosedTagError,
)
from ssmlite.location import SourceLocation
from ssmlite.nodes import Attribute, Element, Node, Text
from ssmlite.parser import Parser
from ssmlite.serialization import from_dict, from_json, to_dict, to_json
from ssmlite.text import extract_text
from ssmlite.visitor import BaseVisitor, decode_tree, transform

__version__ = "0.1.0"


def parse(
    source: str,
    *,
    source_file: str | None = None,
    root_tag: str | None = None,
    max_depth: int | None = None,
) -> Element:
    """Parse SSML source into a validated, entity-decoded tree.

    Args:
        source: SSML source text
        source_file: Optional source file path for error messages
        root_tag: Required root element name (default "speak")
        max_depth: Optional limit on element nesting depth

    Returns:
        The root Element

    Raises:
        ParseError: One of its subclasses; no partial tree is returned.

    Example:
        >>> doc = parse("<speak>Hello <emphasis>world</emphasis>!</speak>")
        >>> [type(child).__name__ for child in doc.children]
        ['Text', 'Element', 'Text']
    """
    config = ParseConfig(root_tag=root_tag or DEFAULT_ROOT_TAG, max_depth=max_depth)
    with parse_config_context(config):
        return Parser(source, source_file=source_file).parse()


def to_text(
    source: str,
    *,
    source_file: str | None = None,
    root_tag: str | None = None,
    max_depth: int | None = None,
) -> str:
    """Parse SSML and return its plain text in one call.

    Accepts the same keyword arguments as parse().

    Example:
        >>> to_text('<speak>Say <prosody rate="slow">123</prosody></speak>')
        'Say 123'
    """
    doc = parse(source, source_file=source_file, root_tag=root_tag, max_depth=max_depth)
    return extract_text(doc)


class SSML:
    """High-level SSML processor holding one immutable configuration.

    Usage:
        >>> ssml = SSML()
        >>> ssml("<speak>Hello</speak>")
        'Hello'

        >>> doc = ssml.parse("<speak><break/></speak>")
        >>> doc.children[0].name
        'break'

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        SSML instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        root_tag: str = DEFAULT_ROOT_TAG,
        max_depth: int | None = None,
    ) -> None:
        """Initialize SSML processor.

        Args:
            root_tag: Required root element name
            max_depth: Optional limit on element nesting depth
        """
        self._config = ParseConfig(root_tag=root_tag, max_depth=max_depth)

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and project to plain text in one call."""
        return extract_text(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Element:
        """Parse SSML source into a validated, entity-decoded tree."""
        set_parse_config(self._config)
        try:
            return Parser(source, source_file=source_file).parse()
        finally:
            reset_parse_config()

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Element]:
        """Parse multiple SSML sources.

        Sets config once, parses all, resets once. The first invalid source
        raises and aborts the batch.

        Example:
            >>> SSML().parse_many(["<speak>a</speak>", "<speak>b</speak>"])[1].children
            (Text(content='b'),)
        """
        set_parse_config(self._config)
        try:
            return [Parser(source, source_file=source_file).parse() for source in sources]
        finally:
            reset_parse_config()


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "parse",
    "to_text",
    "extract_text",
    "decode_entities",
    "lex_attributes",
    # Nodes
    "Attribute",
    "Element",
    "Node",
    "Text",
    # Parser
    "Parser",
    # Visitor + Transform
    "BaseVisitor",
    "transform",
    "decode_tree",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "SSMLError",
    "ParseError",
    "AttributeFormatError",
    "InvalidTagFormatError",
    "UnclosedTagError",
    "InvalidRootError",
    "NestingDepthError",
    # Configuration (ContextVar-based)
    "DEFAULT_ROOT_TAG",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Location
    "SourceLocation",
    # High-level
    "SSML",
]
