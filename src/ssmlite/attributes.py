"""Attribute lexer for SSML start tags.

Turns the raw text between a tag name and its closing ``>`` into an ordered
tuple of Attribute nodes.

Grammar (repeated, skipping leading whitespace each cycle):
    name wsp* "=" wsp* '"' value '"'

``name`` is one or more ASCII word characters or colons; ``value`` is
everything up to the next double quote (quotes cannot be escaped). The loop
ends at the end of the region or on a lone trailing ``/``.

Example:
    >>> lex_attributes('time="500ms" strength="weak" /')
    (Attribute(name='time', value='500ms'), Attribute(name='strength', value='weak'))
"""

from __future__ import annotations

from ssmlite.errors import AttributeFormatError
from ssmlite.location import SourceLocation
from ssmlite.nodes import Attribute
from ssmlite.patterns import NAME_PATTERN, skip_whitespace


def lex_attributes(
    source: str,
    start: int = 0,
    end: int | None = None,
    *,
    source_file: str | None = None,
) -> tuple[Attribute, ...]:
    """Lex the attribute region ``source[start:end]``.

    Offsets are absolute so error locations point into the full document.

    Args:
        source: Full source text
        start: Start of the attribute region
        end: End of the attribute region (defaults to ``len(source)``)
        source_file: Optional source file path for error messages

    Returns:
        Attributes in declaration order, duplicates included.

    Raises:
        AttributeFormatError: On a missing name, ``=``, opening quote or
            closing quote. No partial result is returned.

    """
    if end is None:
        end = len(source)

    def fail(message: str, pos: int) -> AttributeFormatError:
        loc = SourceLocation.from_offset(source, pos, source_file)
        return AttributeFormatError(message, loc.lineno, loc.col_offset, source_file)

    attributes: list[Attribute] = []
    pos = start
    while True:
        pos = skip_whitespace(source, pos, end)
        if pos >= end:
            break
        # A lone "/" is the self-closing marker, not an attribute
        if source[pos] == "/" and skip_whitespace(source, pos + 1, end) >= end:
            break

        name_match = NAME_PATTERN.match(source, pos, end)
        if name_match is None:
            raise fail(f"Invalid attribute format: expected a name at {source[pos]!r}", pos)
        name = name_match.group()
        pos = skip_whitespace(source, name_match.end(), end)

        if pos >= end or source[pos] != "=":
            raise fail(f"Invalid attribute format: expected '=' after {name!r}", pos)
        pos = skip_whitespace(source, pos + 1, end)

        if pos >= end or source[pos] != '"':
            raise fail(f"Invalid attribute format: expected '\"' to open value of {name!r}", pos)
        value_start = pos + 1

        quote_end = source.find('"', value_start, end)
        if quote_end == -1:
            raise fail(f"Invalid attribute format: unterminated value for {name!r}", pos)

        attributes.append(Attribute(name=name, value=source[value_start:quote_end]))
        pos = quote_end + 1

    return tuple(attributes)
