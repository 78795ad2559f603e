"""Recursive descent parser producing a typed SSML tree.

Works directly on the source string with absolute offsets: every step takes
a position and returns the node it built together with the position just
past it, so no substrings of the remaining input are copied.

Pipeline:
    source → _parse_node (lexes attributes on the way) → root validation
    → decode_tree → Element

Thread Safety:
- Parser produces an immutable tree (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Parser instances are single-use; create one per source

"""

from __future__ import annotations

from ssmlite.attributes import lex_attributes
from ssmlite.config import ParseConfig, get_parse_config
from ssmlite.errors import (
    InvalidRootError,
    InvalidTagFormatError,
    NestingDepthError,
    UnclosedTagError,
)
from ssmlite.location import SourceLocation
from ssmlite.nodes import Element, Node, Text
from ssmlite.patterns import (
    CLOSE_TAG_PATTERN,
    OPEN_TAG_PATTERN,
    match_closing_tag,
    skip_whitespace,
)
from ssmlite.utils.logger import get_logger
from ssmlite.visitor import decode_tree

logger = get_logger(__name__)


class Parser:
    """Recursive descent parser for SSML.

    Usage:
        >>> parser = Parser('<speak>Hello <break time="1s"/>world</speak>')
        >>> doc = parser.parse()
        >>> doc.children[1]
        Element(name='break', attributes=(Attribute(name='time', value='1s'),), children=())

    Leading and trailing whitespace of the source is ignored. Whitespace
    inside text runs is preserved verbatim; whitespace that only separates
    tags produces no node.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_config",
        "_start",
        "_end",
    )

    def __init__(
        self,
        source: str,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: SSML source text
            source_file: Optional source file path for error messages

        """
        self._source = source
        self._source_file = source_file
        self._config: ParseConfig = get_parse_config()
        self._end = len(source.rstrip())
        self._start = skip_whitespace(source, 0, self._end)

    def parse(self) -> Element:
        """Parse the source into a validated document with decoded text.

        Returns:
            The root Element, named ``config.root_tag``.

        Raises:
            AttributeFormatError: Malformed attribute in some tag.
            InvalidTagFormatError: A ``<`` that does not start a valid tag.
            UnclosedTagError: An element never closes.
            InvalidRootError: Wrong root, text root, or content after the root.
            NestingDepthError: Nesting deeper than ``config.max_depth``, or
                too deep for the interpreter recursion limit.

        """
        root = self.parse_raw()
        try:
            return decode_tree(root)
        except RecursionError:
            raise self._too_deep() from None

    def parse_raw(self) -> Element:
        """Parse and validate without decoding entities in text nodes."""
        logger.debug(
            "Parsing %d characters (root=<%s>)%s",
            self._end - self._start,
            self._config.root_tag,
            f" from {self._source_file}" if self._source_file else "",
        )
        try:
            node, pos = self._parse_node(self._start, None, 0)
        except RecursionError:
            raise self._too_deep() from None
        root = self._validate_root(node, pos)
        logger.debug("Parsed <%s> with %d top-level children", root.name, len(root.children))
        return root

    # -- Internal ---------------------------------------------------------------

    def _location(self, offset: int) -> SourceLocation:
        return SourceLocation.from_offset(self._source, offset, self._source_file)

    def _too_deep(self) -> NestingDepthError:
        loc = self._location(self._start)
        return NestingDepthError(
            "Nesting depth exceeds the interpreter recursion limit",
            loc.lineno,
            loc.col_offset,
            self._source_file,
        )

    def _parse_node(
        self,
        pos: int,
        enclosing: str | None,
        depth: int,
    ) -> tuple[Node | None, int]:
        """Parse one node starting at ``pos``.

        Returns ``(None, new_pos)`` when the closing tag of ``enclosing`` was
        consumed instead of a node.
        """
        source = self._source
        end = self._end
        head = skip_whitespace(source, pos, end)

        # Text run: keeps the whitespace skipped above
        if head >= end or source[head] != "<":
            next_tag = source.find("<", head, end)
            if next_tag == -1:
                next_tag = end
            return Text(source[pos:next_tag]), next_tag

        if enclosing is not None:
            after = match_closing_tag(source, head, end, enclosing)
            if after != -1:
                return None, after
            stray = CLOSE_TAG_PATTERN.match(source, head, end)
            if stray is not None:
                loc = self._location(head)
                raise UnclosedTagError(
                    enclosing,
                    f"Unclosed tag <{enclosing}>: found </{stray.group(1)}>",
                    loc.lineno,
                    loc.col_offset,
                    self._source_file,
                )

        tag_match = OPEN_TAG_PATTERN.match(source, head, end)
        if tag_match is None:
            loc = self._location(head)
            raise InvalidTagFormatError(
                "Invalid tag format", loc.lineno, loc.col_offset, self._source_file
            )
        name = tag_match.group(1)

        depth += 1
        max_depth = self._config.max_depth
        if max_depth is not None and depth > max_depth:
            loc = self._location(head)
            raise NestingDepthError(
                f"Nesting depth exceeds {max_depth} at <{name}>",
                loc.lineno,
                loc.col_offset,
                self._source_file,
            )

        attributes = lex_attributes(
            source, tag_match.start(2), tag_match.end(2), source_file=self._source_file
        )

        if "/" in tag_match.group(3):
            return Element(name=name, attributes=attributes), tag_match.end()

        children: list[Node] = []
        pos = tag_match.end()
        while True:
            if pos >= end:
                loc = self._location(head)
                raise UnclosedTagError(
                    name,
                    f"Unclosed tag <{name}>",
                    loc.lineno,
                    loc.col_offset,
                    self._source_file,
                )
            child, pos = self._parse_node(pos, name, depth)
            if child is None:
                break
            children.append(child)

        return Element(name=name, attributes=attributes, children=tuple(children)), pos

    def _validate_root(self, node: Node | None, pos: int) -> Element:
        """Check the top-level node is the one required root element."""
        root_tag = self._config.root_tag
        match node:
            case Element(name=name) if name == root_tag:
                root = node
            case Element(name=name):
                loc = self._location(self._start)
                raise InvalidRootError(
                    f"Root node must be <{root_tag}>, got <{name}>",
                    loc.lineno,
                    loc.col_offset,
                    self._source_file,
                )
            case _:
                loc = self._location(self._start)
                raise InvalidRootError(
                    f"Root node must be <{root_tag}>, got text",
                    loc.lineno,
                    loc.col_offset,
                    self._source_file,
                )

        trailing = skip_whitespace(self._source, pos, self._end)
        if trailing < self._end:
            loc = self._location(trailing)
            raise InvalidRootError(
                "Multiple root nodes are not allowed",
                loc.lineno,
                loc.col_offset,
                self._source_file,
            )
        return root
