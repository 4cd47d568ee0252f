"""Playtest session management."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional

from framewar.game.resolver import Action, ActionResult
from framewar.game.table import GameTable
from framewar.playtest.display import StateRenderer
from framewar.playtest.input import HumanPlayer, InputResult
from framewar.playtest.rules import RuleExplainer

logger = logging.getLogger(__name__)


@dataclass
class SessionConfig:
    """Configuration for playtest session."""

    debug: bool = False
    max_rounds: int = 5000
    seed: Optional[int] = None
    show_rules: bool = True

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


class PlaytestSession:
    """Runs an interactive game of War in the terminal."""

    def __init__(
        self,
        config: SessionConfig,
        read_input: Optional[Callable[[], InputResult]] = None,
    ):
        """Initialize session.

        Args:
            config: Session configuration
            read_input: Source of player input (default: stdin via HumanPlayer)
        """
        self.config = config
        self.seed = config.seed
        self.table = GameTable(seed=self.seed)

        self.renderer = StateRenderer()
        self.explainer = RuleExplainer()
        self.human_input = HumanPlayer()
        self._read_input = read_input or self.human_input.get_action

        self.history: list[dict] = []

    def _record(self, result: ActionResult) -> None:
        """Record an applied action in history."""
        self.history.append({
            "round": result.state.round_number,
            "action": result.action.value,
            "accepted": result.accepted,
            "status": result.state.status.value,
        })

    def step(self, action: Action) -> ActionResult:
        """Apply one action to the table and record it."""
        result = self.table.apply(action)
        self._record(result)
        return result

    def run(self, output_fn: Callable[[str], None] = print) -> ActionResult | None:
        """Run the session until the player quits or the round cap is hit.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            The last ActionResult, or None if the player never acted
        """
        if self.config.show_rules:
            output_fn(self.explainer.explain_rules())
            output_fn("")
            output_fn(f"Seed: {self.seed} (use --seed {self.seed} to replay)")

        last: ActionResult | None = None

        while True:
            state = self.table.state
            output_fn("")
            output_fn(self.renderer.render(state, self.config.debug))

            if state.round_number >= self.config.max_rounds and not state.is_over:
                output_fn(f"\nRound limit reached. {state.leader()} is ahead.")
                break

            output_fn(self.renderer.render_actions(state))
            choice = self._read_input()

            if choice.quit:
                last = self.step(Action.EXIT)
                output_fn(last.state.message)
                break

            if choice.error:
                output_fn(choice.error)
                continue

            assert choice.action is not None
            last = self.step(choice.action)
            if not last.accepted:
                output_fn(last.reason or "That action is not available right now.")
            elif last.action is Action.VIEW_RULES:
                output_fn(self.explainer.explain_rules())

        logger.debug(f"Session {self.seed} finished after {len(self.history)} actions")
        return last
