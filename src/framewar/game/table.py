"""Single owner of a live game."""

from __future__ import annotations

import copy
import logging
import random
import threading
from typing import Optional

from framewar.game.resolver import Action, ActionResult, apply_action
from framewar.game.state import GameState, GameStatus, new_game

logger = logging.getLogger(__name__)


class GameTable:
    """Holds the current game and serializes every transition on it.

    Thread-safety: apply() and snapshot() are protected by a threading.Lock,
    so concurrent requests against one table never interleave transitions.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """Initialize the table and deal the first game.

        Args:
            seed: Seed for a new random source. Ignored if ``rng`` is given.
            rng: Random source used for every shuffle at this table.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self._lock = threading.Lock()
        self._state = new_game(self.rng)

    @property
    def state(self) -> GameState:
        """The live state. Callers must not mutate it outside apply()."""
        return self._state

    def apply(self, action: Action | str, snapshot: bool = False) -> ActionResult:
        """Apply one action to the live game.

        Args:
            action: Action or its wire name
            snapshot: Return a deep copy of the resulting state, taken
                before the lock is released

        Raises:
            UnknownActionError: If ``action`` is a name that maps to no action
        """
        with self._lock:
            was_over = self._state.status is GameStatus.ENDED
            result = apply_action(self._state, action, self.rng)
            self._state = result.state

            if not result.accepted:
                logger.info(f"Declined {result.action.value}: {result.reason}")
            else:
                logger.debug(
                    f"Applied {result.action.value}: status={result.state.status.value} "
                    f"player={len(result.state.player_deck)} "
                    f"computer={len(result.state.computer_deck)} "
                    f"pile={len(result.state.war_pile)}"
                )
                if result.state.is_over and not was_over:
                    logger.info(
                        f"Game ended after {result.state.round_number} rounds: "
                        f"{result.state.message}"
                    )

            if snapshot:
                result.state = copy.deepcopy(result.state)
            return result

    def snapshot(self) -> GameState:
        """Deep copy of the live state, safe to read while others play."""
        with self._lock:
            return copy.deepcopy(self._state)
