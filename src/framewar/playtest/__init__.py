"""Terminal playtesting for War."""

from framewar.playtest.display import StateRenderer, format_card
from framewar.playtest.rules import RuleExplainer
from framewar.playtest.input import HumanPlayer, InputResult
from framewar.playtest.session import PlaytestSession, SessionConfig

__all__ = [
    "StateRenderer",
    "format_card",
    "RuleExplainer",
    "HumanPlayer",
    "InputResult",
    "PlaytestSession",
    "SessionConfig",
]
