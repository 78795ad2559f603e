"""ContextVar-based parse configuration for ssmlite.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per SSML instance (or per parse() call) and read by the
parser, so nested calls never need it threaded through as arguments.

Usage:
    # Direct parser usage (advanced)
    from ssmlite.config import set_parse_config, reset_parse_config, ParseConfig

    set_parse_config(ParseConfig(root_tag="voice"))
    try:
        doc = Parser(source).parse()
    finally:
        reset_parse_config()

    # Or use the context manager
    with parse_config_context(ParseConfig(max_depth=32)):
        doc = Parser(source).parse()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

DEFAULT_ROOT_TAG = "speak"


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded, it's per-call state.
    It remains on the Parser instance.

    Attributes:
        root_tag: Name the document's single root element must have
        max_depth: Maximum element nesting depth (None = limited only by
            the interpreter's recursion limit)

    """

    root_tag: str = DEFAULT_ROOT_TAG
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not self.root_tag:
            raise ValueError("root_tag cannot be empty")
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError("max_depth must be at least 1")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "max_depth": 64,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.max_depth
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "ssml_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Args:
        config: ParseConfig instance to use for this context.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(root_tag="voice")):
        ...     doc = Parser("<voice>hi</voice>").parse()
        >>> # Automatically reset to previous config

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_ROOT_TAG",
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
