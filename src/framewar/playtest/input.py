"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from framewar.game.resolver import Action, UnknownActionError

KEY_ACTIONS = {
    "": Action.DRAW,
    "d": Action.DRAW,
    "w": Action.CONTINUE_WAR,
    "r": Action.RESET,
    "?": Action.VIEW_RULES,
    "h": Action.VIEW_RULES,
}

QUIT_KEYS = ("q", "quit", "exit", "exit_game")


@dataclass
class InputResult:
    """Result of human input."""

    action: Optional[Action] = None
    quit: bool = False
    error: Optional[str] = None


class HumanPlayer:
    """Handles human player input."""

    def parse(self, raw: str) -> InputResult:
        """Turn one line of input into an action, a quit, or an error."""
        raw = raw.strip().lower()

        if raw in QUIT_KEYS:
            return InputResult(quit=True)

        action = KEY_ACTIONS.get(raw)
        if action is not None:
            return InputResult(action=action)

        try:
            return InputResult(action=Action.parse(raw))
        except UnknownActionError:
            return InputResult(error=f"Invalid input '{raw}'. Enter d, w, r, ? or q.")

    def get_action(self, prompt: str = "> ") -> InputResult:
        """Read an action from stdin.

        Returns:
            InputResult with action, quit flag, or error
        """
        try:
            raw = input(prompt)
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)
        return self.parse(raw)
