"""Source location tracking for error messages.

Provides SourceLocation dataclass for tracking positions in source text.
The parser works on absolute string offsets; locations are only computed
when an error is raised.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        offset: Absolute offset in the source string (0-indexed)
        source_file: Source file path (optional)

    Examples:
        >>> SourceLocation.from_offset("<speak>\\n<b", 9)
        SourceLocation(lineno=2, col_offset=2, offset=9, source_file=None)

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    @classmethod
    def from_offset(
        cls,
        source: str,
        offset: int,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Build a location from an absolute offset into ``source``.

        Offsets past the end are clamped to ``len(source)``.
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            source_file=source_file,
        )

