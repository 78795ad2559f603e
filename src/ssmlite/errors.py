"""Exception classes for ssmlite.

Every failure aborts the whole parse; no partial tree is ever returned.
All parse failures derive from ParseError and carry an optional location.
"""

from __future__ import annotations


class SSMLError(Exception):
    """Base exception for all ssmlite errors."""

    pass


class ParseError(SSMLError):
    """Error during SSML parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class AttributeFormatError(ParseError):
    """Malformed ``name="value"`` sequence inside a tag."""


class InvalidTagFormatError(ParseError):
    """Opening tag does not match the tag grammar."""


class UnclosedTagError(ParseError):
    """Input ended (or another element's closing tag appeared) before a tag closed."""

    def __init__(
        self,
        tag_name: str,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize unclosed tag error.

        Args:
            tag_name: Name of the element that never closed
            message: Error description
            lineno: Line number of the opening tag (1-indexed)
            col_offset: Column offset of the opening tag (1-indexed)
            source_file: Path to source file (optional)
        """
        self.tag_name = tag_name
        super().__init__(message, lineno, col_offset, source_file)


class InvalidRootError(ParseError):
    """Document is not a single root element with the required name."""


class NestingDepthError(ParseError):
    """Element nesting exceeded the configured ``max_depth``."""
