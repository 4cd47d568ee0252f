"""CLI command for autoplaying games of War."""

from __future__ import annotations

import json
import logging

import click

from framewar.game.simulate import play_war_game

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Seed of the first game")
@click.option("-n", "--games", type=int, default=1, help="Number of games to play")
@click.option("--max-rounds", type=int, default=5000, help="Round limit per game")
@click.option("--json", "as_json", is_flag=True, help="Emit one JSON object per game")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    games: int,
    max_rounds: int,
    as_json: bool,
    verbose: bool,
):
    """Play games of War automatically and report the outcome.

    With --seed, game i uses seed + i so runs are reproducible.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    if games < 1:
        raise click.BadParameter("must be at least 1", param_hint="--games")

    wins = {"Player": 0, "Computer": 0, "Tie": 0}
    for i in range(games):
        game_seed = seed + i if seed is not None else None
        result = play_war_game(seed=game_seed, max_rounds=max_rounds)
        wins[result.winner] += 1
        logger.debug(f"Game {i + 1}: {result.winner} after {result.rounds} rounds")

        if as_json:
            record = result.to_dict()
            record["seed"] = game_seed
            click.echo(json.dumps(record))
        elif result.winner == "Tie":
            click.echo(f"Game {i + 1}: no winner after {result.rounds} rounds, {result.wars} wars")
        else:
            status = "" if result.finished else " (round limit)"
            click.echo(
                f"Game {i + 1}: {result.winner} wins in {result.rounds} rounds, "
                f"{result.wars} wars{status}"
            )

    if games > 1 and not as_json:
        click.echo(
            f"\nPlayer {wins['Player']} | Computer {wins['Computer']} | Unfinished ties {wins['Tie']}"
        )


if __name__ == "__main__":
    main()
