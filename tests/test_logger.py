"""Tests for the lexis logger namespace."""

import logging

import pytest

from lexis.utils.logger import get_logger


class TestGetLogger:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("lexis", "lexis"),
            ("lexis.scanner.core", "lexis.scanner.core"),
            ("plugin", "lexis.plugin"),
            ("lexisplugin", "lexis.lexisplugin"),
        ],
    )
    def test_namespacing(self, name: str, expected: str) -> None:
        assert get_logger(name).name == expected

    def test_messages_reach_root_logger(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="lexis"):
            get_logger("plugin").debug("hello")
        assert [r.name for r in caplog.records] == ["lexis.plugin"]
