"""Tests for ContextVar-based parse configuration.

Validates defaults, immutability, context manager behavior and thread
isolation.
"""

from threading import Thread

import pytest

from ssmlite import (
    SSML,
    ParseConfig,
    Parser,
    get_parse_config,
    parse,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from ssmlite.errors import InvalidRootError


class TestParseConfigDataclass:
    def test_default_values(self) -> None:
        config = ParseConfig()
        assert config.root_tag == "speak"
        assert config.max_depth is None

    def test_immutability(self) -> None:
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.root_tag = "voice"  # type: ignore[misc]

    def test_rejects_empty_root_tag(self) -> None:
        with pytest.raises(ValueError):
            ParseConfig(root_tag="")

    def test_rejects_non_positive_depth(self) -> None:
        with pytest.raises(ValueError):
            ParseConfig(max_depth=0)


class TestParseConfigFromDict:
    def test_basic(self) -> None:
        config = ParseConfig.from_dict({"root_tag": "voice", "max_depth": 8})
        assert config == ParseConfig(root_tag="voice", max_depth=8)

    def test_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"max_depth": 4, "unknown_key": "ignored"})
        assert config.max_depth == 4
        assert config.root_tag == "speak"

    def test_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    def test_get_default(self) -> None:
        reset_parse_config()
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        set_parse_config(ParseConfig(root_tag="voice"))
        try:
            assert get_parse_config().root_tag == "voice"
        finally:
            reset_parse_config()
        assert get_parse_config().root_tag == "speak"

    def test_context_manager_restores(self) -> None:
        with parse_config_context(ParseConfig(root_tag="voice")):
            assert get_parse_config().root_tag == "voice"
        assert get_parse_config().root_tag == "speak"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(InvalidRootError):
            with parse_config_context(ParseConfig(root_tag="voice")):
                Parser("<speak/>").parse()
        assert get_parse_config().root_tag == "speak"

    def test_parse_does_not_leak_config(self) -> None:
        parse("<voice/>", root_tag="voice")
        assert get_parse_config() == ParseConfig()

    def test_ssml_instance_does_not_leak_config(self) -> None:
        SSML(root_tag="voice").parse("<voice/>")
        assert get_parse_config() == ParseConfig()


class TestThreadIsolation:
    def test_threads_see_their_own_config(self) -> None:
        results: dict[str, str] = {}
        errors: list[str] = []

        def worker(tag: str) -> None:
            try:
                with parse_config_context(ParseConfig(root_tag=tag)):
                    for _ in range(50):
                        doc = Parser(f"<{tag}>x</{tag}>").parse()
                        assert doc.name == tag
                results[tag] = get_parse_config().root_tag
            except Exception as e:
                errors.append(f"{tag}: {e}")

        threads = [Thread(target=worker, args=(tag,)) for tag in ("speak", "voice", "p", "s")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert results == {tag: "speak" for tag in ("speak", "voice", "p", "s")}
