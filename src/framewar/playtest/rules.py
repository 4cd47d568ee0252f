"""Rule explanation."""

from __future__ import annotations

from framewar.game.resolver import WAR_FACE_DOWN, WAR_CARDS_NEEDED
from framewar.game.state import DECK_SIZE


class RuleExplainer:
    """Explains the rules of War."""

    def explain_rules(self) -> str:
        """Generate full rule text."""
        lines: list[str] = []

        lines.append("=== War ===")
        lines.append("")
        lines.append(f"Setup: A {DECK_SIZE}-card deck is shuffled and split between you and the computer")
        lines.append("Turn: Both sides reveal their top card; the higher card takes both")
        lines.append("Ranks: Ace is low (1), then 2-10, Jack, Queen, King")
        lines.append(
            f"War: On a tie each side adds {WAR_FACE_DOWN} cards face down and one face up; "
            "the higher face-up card takes the whole pile. Ties repeat the war"
        )
        lines.append(
            f"Goal: Take every card. A side that cannot put up {WAR_CARDS_NEEDED} cards "
            "for a war loses it by default"
        )

        return "\n".join(lines)
