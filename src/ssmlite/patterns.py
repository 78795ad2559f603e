"""Precompiled patterns and scanning helpers shared by the lexer and parser.

All patterns are compiled once at module level and only ever used with
``pattern.match(source, pos, endpos)`` so no substrings are copied while
scanning.

Usage:
    from ssmlite.patterns import NAME_PATTERN, skip_whitespace

    pos = skip_whitespace(source, pos, end)
    m = NAME_PATTERN.match(source, pos, end)
"""

import re

# Tag and attribute names: ASCII word characters or colons.
NAME_PATTERN = re.compile(r"(?a:[\w:]+)")

# < wsp* name wsp* attrs (wsp* / wsp*)? >
# The attribute group is lazy so a trailing "/" lands in the marker group.
OPEN_TAG_PATTERN = re.compile(r"<\s*((?a:[\w:]+))\s*([^>]*?)(\s*/?\s*)>")

# Any closing tag, used to report which tag interrupted an open element.
CLOSE_TAG_PATTERN = re.compile(r"</\s*((?a:[\w:]+))\s*>")


def skip_whitespace(source: str, pos: int, end: int) -> int:
    """Return the first position in ``source[pos:end]`` that is not whitespace."""
    while pos < end and source[pos].isspace():
        pos += 1
    return pos


def match_closing_tag(source: str, pos: int, end: int, name: str) -> int:
    """Match ``</ name >`` at ``pos`` without building a pattern per tag.

    Whitespace is allowed around the name.

    Returns:
        Position just past the ``>``, or -1 if the closing tag is not there.

    """
    if not source.startswith("</", pos, end):
        return -1
    pos = skip_whitespace(source, pos + 2, end)
    if not source.startswith(name, pos, end):
        return -1
    pos = skip_whitespace(source, pos + len(name), end)
    if pos < end and source[pos] == ">":
        return pos + 1
    return -1
