"""Terminal display for game state."""

from __future__ import annotations

from framewar.game.cards import Card, Suit, card_label
from framewar.game.resolver import Action, available_actions
from framewar.game.state import GameState


# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

WAR_BANNER = "⚔️ WAR! ⚔️"

ACTION_KEYS = {
    Action.DRAW: ("d", "Draw Card"),
    Action.CONTINUE_WAR: ("w", "Continue War"),
    Action.RESET: ("r", "Reset Game"),
    Action.VIEW_RULES: ("?", "Rules"),
    Action.EXIT: ("q", "Exit Game"),
}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    rank = card_label(card.value)
    if len(rank) > 2:
        rank = rank[0]
    return f"{rank}{SUIT_SYMBOLS[card.suit]}"


def display_message(state: GameState) -> str:
    """Headline shown for a state: the war banner during a war."""
    return WAR_BANNER if state.is_war else state.message


class StateRenderer:
    """Renders game state to terminal."""

    def render(self, state: GameState, debug: bool = False) -> str:
        """Render the table from the player's side."""
        lines: list[str] = []

        lines.append(f"=== Round {state.round_number} ===")
        lines.append(
            f"Player Cards: {len(state.player_deck)} | "
            f"Computer Cards: {len(state.computer_deck)}"
        )

        if state.player_card and state.computer_card:
            lines.append(
                f"Your card: {format_card(state.player_card)}   "
                f"Computer's card: {format_card(state.computer_card)}"
            )

        if state.war_pile:
            lines.append(f"War pile: {len(state.war_pile)} cards")

        lines.append("")
        lines.append(display_message(state))

        if debug:
            lines.append("")
            lines.append("--- Debug Info ---")
            lines.append(f"Status: {state.status.value}")
            next_player = format_card(state.player_deck[0]) if state.player_deck else "-"
            next_computer = format_card(state.computer_deck[0]) if state.computer_deck else "-"
            lines.append(f"Next cards: player {next_player}, computer {next_computer}")
            if state.war_pile:
                pile = ", ".join(format_card(c) for c in state.war_pile)
                lines.append(f"War pile: [{pile}]")

        return "\n".join(lines)

    def render_actions(self, state: GameState) -> str:
        """Show the keys for the actions offered in the current status."""
        options = []
        for action in available_actions(state.status):
            key, name = ACTION_KEYS[action]
            options.append(f"[{key}] {name}")
        return "  ".join(options)
