"""FastAPI dependency injection."""

from __future__ import annotations

from framewar.game.table import GameTable
from framewar.web.config import WebConfig


# Singleton table instance
_table: GameTable | None = None


def get_table() -> GameTable:
    """Get the process-wide game table, dealing it on first use."""
    global _table
    if _table is None:
        _table = GameTable(seed=WebConfig.from_env().seed)
    return _table


def set_table(table: GameTable | None) -> None:
    """Replace the process-wide table (None drops it)."""
    global _table
    _table = table
