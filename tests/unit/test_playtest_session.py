"""Tests for PlaytestSession."""

from framewar.game.resolver import Action
from framewar.game.state import GameStatus
from framewar.playtest.input import InputResult
from framewar.playtest.session import PlaytestSession, SessionConfig


def scripted(*results: InputResult):
    """Input source that replays the given results."""
    queue = list(results)
    return lambda: queue.pop(0)


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_default_config(self):
        """Default config has sensible values."""
        config = SessionConfig()

        assert config.debug is False
        assert config.max_rounds == 5000
        assert config.show_rules is True

    def test_seed_generation(self):
        """Generates seed if not provided."""
        assert SessionConfig().seed is not None
        assert SessionConfig(seed=5).seed == 5


class TestPlaytestSession:
    """Tests for PlaytestSession."""

    def test_initialization(self):
        session = PlaytestSession(SessionConfig(seed=12345))

        assert session.seed == 12345
        assert session.history == []
        assert session.table.state.status is GameStatus.INITIAL

    def test_same_seed_same_deal(self):
        a = PlaytestSession(SessionConfig(seed=12345))
        b = PlaytestSession(SessionConfig(seed=12345))

        assert a.table.state.player_deck == b.table.state.player_deck

    def test_step_records_history(self):
        session = PlaytestSession(SessionConfig(seed=12345))

        session.step(Action.VIEW_RULES)
        session.step(Action.CONTINUE_WAR)

        assert len(session.history) == 2
        assert session.history[0]["action"] == "view_rules"
        assert session.history[1]["accepted"] is False


class TestGameLoop:
    """Tests for the run loop."""

    def test_quit_exits_game(self):
        output: list[str] = []
        session = PlaytestSession(
            SessionConfig(seed=12345),
            read_input=scripted(
                InputResult(action=Action.DRAW),
                InputResult(action=Action.VIEW_RULES),
                InputResult(quit=True),
            ),
        )

        last = session.run(output_fn=output.append)

        assert last.action is Action.EXIT
        assert session.table.state.status is GameStatus.ENDED
        assert [h["action"] for h in session.history] == ["draw", "view_rules", "exit"]
        assert "Thanks for playing! Come back soon!" in output
        assert any("Seed: 12345" in line for line in output)

    def test_invalid_input_is_reported(self):
        output: list[str] = []
        session = PlaytestSession(
            SessionConfig(seed=1, show_rules=False),
            read_input=scripted(
                InputResult(error="Invalid input 'x'."),
                InputResult(quit=True),
            ),
        )

        session.run(output_fn=output.append)

        assert "Invalid input 'x'." in output
        assert len(session.history) == 1

    def test_declined_action_is_reported(self):
        output: list[str] = []
        session = PlaytestSession(
            SessionConfig(seed=1, show_rules=False),
            read_input=scripted(
                InputResult(action=Action.CONTINUE_WAR),
                InputResult(quit=True),
            ),
        )

        session.run(output_fn=output.append)

        assert "There is no war to continue." in output

    def test_round_limit_ends_session(self):
        output: list[str] = []
        session = PlaytestSession(
            SessionConfig(seed=1, max_rounds=1, show_rules=False),
            read_input=scripted(InputResult(action=Action.DRAW)),
        )

        last = session.run(output_fn=output.append)

        assert last.action is Action.DRAW
        assert any("Round limit reached" in line for line in output)

    def test_rules_action_prints_full_rules(self):
        output: list[str] = []
        session = PlaytestSession(
            SessionConfig(seed=1, show_rules=False),
            read_input=scripted(
                InputResult(action=Action.VIEW_RULES),
                InputResult(quit=True),
            ),
        )

        session.run(output_fn=output.append)

        assert any(line.startswith("=== War ===") for line in output)
        assert session.table.state.message == "Thanks for playing! Come back soon!"
