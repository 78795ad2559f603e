"""Character entity decoding for SSML text content.

Only the three references SSML text needs are recognized. Numeric
references, ``&quot;`` and ``&apos;`` pass through unchanged.

Example:
    >>> decode_entities("x &lt; y &gt; z")
    'x < y > z'
    >>> decode_entities("a &amp;lt; b")
    'a &lt; b'
"""

from __future__ import annotations

# Order matters: &amp; must be replaced last so that "&amp;lt;" yields "&lt;"
# and is not decoded a second time into "<".
ENTITIES: tuple[tuple[str, str], ...] = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)


def decode_entities(text: str) -> str:
    """Replace ``&lt;``, ``&gt;`` and ``&amp;`` with the characters they stand for.

    Pure and total: never raises.
    """
    if "&" not in text:
        return text
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text
