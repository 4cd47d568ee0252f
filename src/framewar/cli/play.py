"""CLI command for playing War in the terminal."""

from __future__ import annotations

import logging

import click

from framewar.playtest.session import PlaytestSession, SessionConfig

logger = logging.getLogger(__name__)


@click.command()
@click.option("--seed", type=int, default=None, help="Random seed for reproducibility")
@click.option("--debug", is_flag=True, help="Show the next cards and the war pile")
@click.option("--max-rounds", type=int, default=5000, help="Round limit before forced end")
@click.option("--show-rules/--no-rules", default=True, help="Display rules at start")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    seed: int | None,
    debug: bool,
    max_rounds: int,
    show_rules: bool,
    verbose: bool,
):
    """Play War against the computer.

    Keys: Enter or d draws, w continues a war, r resets, ? shows the rules,
    q quits.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    config = SessionConfig(
        debug=debug,
        max_rounds=max_rounds,
        seed=seed,
        show_rules=show_rules,
    )
    session = PlaytestSession(config)

    try:
        session.run(output_fn=click.echo)
    except KeyboardInterrupt:
        click.echo("\n\nGame interrupted.")

    click.echo("\nThanks for playing!")


if __name__ == "__main__":
    main()
