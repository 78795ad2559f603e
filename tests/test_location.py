"""Tests for SourceLocation offset conversion."""

import pytest

from ssmlite.location import SourceLocation


class TestFromOffset:
    @pytest.mark.parametrize(
        ("source", "offset", "expected"),
        [
            ("<speak/>", 0, (1, 1)),
            ("<speak/>", 3, (1, 4)),
            ("<speak>\n<b", 8, (2, 1)),
            ("<speak>\n<b", 9, (2, 2)),
            ("a\n\nb", 3, (3, 1)),
        ],
    )
    def test_line_and_column(self, source: str, offset: int, expected: tuple[int, int]) -> None:
        loc = SourceLocation.from_offset(source, offset)
        assert (loc.lineno, loc.col_offset) == expected
        assert loc.offset == offset

    def test_offset_clamped(self) -> None:
        loc = SourceLocation.from_offset("ab\ncd", 99)
        assert (loc.lineno, loc.col_offset, loc.offset) == (2, 3, 5)
        assert SourceLocation.from_offset("ab", -4).offset == 0

    def test_carries_source_file(self) -> None:
        loc = SourceLocation.from_offset("<speak/>", 1, "a.ssml")
        assert loc.source_file == "a.ssml"

    def test_frozen(self) -> None:
        loc = SourceLocation.from_offset("x", 0)
        with pytest.raises(AttributeError):
            loc.lineno = 5  # type: ignore[misc]
