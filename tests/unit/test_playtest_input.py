"""Tests for human input parsing."""

from unittest.mock import patch

import pytest
from framewar.game.resolver import Action
from framewar.playtest.input import HumanPlayer


class TestParse:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("", Action.DRAW),
            ("d", Action.DRAW),
            ("  D  ", Action.DRAW),
            ("w", Action.CONTINUE_WAR),
            ("r", Action.RESET),
            ("?", Action.VIEW_RULES),
            ("continueWar", Action.CONTINUE_WAR),
            ("rules", Action.VIEW_RULES),
        ],
    )
    def test_actions(self, raw, expected):
        result = HumanPlayer().parse(raw)

        assert result.action is expected
        assert result.quit is False
        assert result.error is None

    @pytest.mark.parametrize("raw", ["q", "quit", "exit"])
    def test_quit(self, raw):
        assert HumanPlayer().parse(raw).quit is True

    def test_invalid_input(self):
        result = HumanPlayer().parse("xyz")

        assert result.action is None
        assert "Invalid input 'xyz'" in result.error


class TestGetAction:
    def test_reads_stdin(self):
        with patch("builtins.input", return_value="w"):
            result = HumanPlayer().get_action()

        assert result.action is Action.CONTINUE_WAR

    def test_eof_quits(self):
        with patch("builtins.input", side_effect=EOFError):
            result = HumanPlayer().get_action()

        assert result.quit is True
