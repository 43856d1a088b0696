import numpy as np
import pytest

from hexapawn.agents import Agent, MenaceAgent, MenaceConfig, RandomAgent
from hexapawn.core import Coordinate, GameResult, Move, Side, initialize_game_state
from hexapawn.orchestration import GameSession, MissingAgentError


def make_session(white_seed: int = 1, black_seed: int = 2) -> GameSession:
    return GameSession(
        white_agent=MenaceAgent(MenaceConfig(seed=white_seed)),
        black_agent=MenaceAgent(MenaceConfig(seed=black_seed)),
    )


def test_illegal_move_is_rejected_without_change() -> None:
    session = GameSession()
    before = session.state

    assert not session.make_move(Move(Coordinate(0, 0), Coordinate(2, 0)))
    assert session.state is before


def test_human_moves_then_ai_replies() -> None:
    black = MenaceAgent(MenaceConfig(seed=5))
    session = GameSession(black_agent=black)

    assert not session.make_ai_move()  # White has no agent
    assert session.make_move(session.legal_moves()[1])
    assert session.state.current_side == Side.BLACK
    assert session.make_ai_move()
    assert session.state.current_side == Side.WHITE
    assert len(black.game_history()) == 1


def test_moves_after_game_end_are_rejected() -> None:
    session = make_session()
    result = session.play_one_game()

    assert result in (GameResult.WHITE_WIN, GameResult.BLACK_WIN)
    finished = session.state
    assert not session.make_ai_move()
    assert not session.make_move(Move(Coordinate(0, 0), Coordinate(1, 0)))
    assert session.state is finished


def test_game_end_teaches_both_agents() -> None:
    session = make_session()
    result = session.play_one_game()

    white, black = session.white_agent, session.black_agent
    assert white.games_played == 1 and black.games_played == 1
    assert white.game_history() == [] and black.game_history() == []
    if result == GameResult.WHITE_WIN:
        assert (white.games_won, black.games_lost) == (1, 1)
    else:
        assert (white.games_lost, black.games_won) == (1, 1)


def test_play_one_game_without_agent_raises() -> None:
    session = GameSession(white_agent=MenaceAgent(MenaceConfig(seed=0)))
    with pytest.raises(MissingAgentError):
        session.play_one_game()
    assert session.state.current_side == Side.BLACK


def test_start_new_game_resets_board_and_history_but_keeps_weights() -> None:
    session = make_session()
    session.make_ai_move()
    white = session.white_agent
    assert white.game_history()

    session.start_new_game()

    assert session.state == initialize_game_state()
    assert white.game_history() == []
    assert len(white.known_positions()) == 1


def test_listeners_are_notified() -> None:
    session = make_session()
    states, moves, endings = [], [], []
    session.add_state_listener(states.append)
    session.add_move_listener(lambda move, side: moves.append((move, side)))
    session.add_game_end_listener(endings.append)

    session.start_new_game()
    result = session.play_one_game()

    assert len(states) == len(moves) + 1
    assert moves[0][1] == Side.WHITE
    assert moves[1][1] == Side.BLACK
    assert endings == [result]
    assert states[-1].result == result


def test_train_reports_each_game() -> None:
    session = make_session(white_seed=10, black_seed=20)
    progress = []

    history = session.train(30, progress_callback=lambda n, result: progress.append((n, result)))

    assert [entry.game_number for entry in history] == list(range(1, 31))
    assert [n for n, _ in progress] == list(range(1, 31))
    assert [entry.result for entry in history] == [result for _, result in progress]
    assert GameResult.DRAW not in {entry.result for entry in history}

    last = history[-1]
    assert last.total_games_played == 30
    assert last.white_games_won + last.black_games_won == 30
    assert last.white_win_rate == pytest.approx(last.white_games_won / 30)
    assert last.as_dict()["result"] == last.result.value


def test_training_never_drives_weights_negative() -> None:
    session = make_session(white_seed=3, black_seed=4)
    session.train(200)

    for agent in (session.white_agent, session.black_agent):
        for key in agent.known_positions():
            assert all(weight >= 0 for weight in agent.move_weights(key).values())


def test_same_seeds_replay_identically() -> None:
    first = make_session(white_seed=8, black_seed=9)
    second = make_session(white_seed=8, black_seed=9)

    assert [r.result for r in first.train(25)] == [r.result for r in second.train(25)]
    assert first.black_agent.snapshot() == second.black_agent.snapshot()


def test_random_agent_baseline_has_zero_stats() -> None:
    session = GameSession(
        white_agent=RandomAgent(np.random.default_rng(0)),
        black_agent=MenaceAgent(MenaceConfig(seed=0)),
    )
    history = session.train(5)

    assert all(entry.white_win_rate == 0.0 for entry in history)
    assert all(entry.white_games_won == 0 for entry in history)
    assert session.black_agent.games_played == 5


class ScoringRandomAgent(RandomAgent):
    """Random mover that keeps its own tally of wins."""

    def __init__(self, seed: int) -> None:
        super().__init__(np.random.default_rng(seed))
        self.games_won = 0
        self.games_played = 0

    def learn(self, result: GameResult, side: Side) -> None:
        self.games_played += 1
        if result == GameResult.win_for(side):
            self.games_won += 1

    def win_rate(self) -> float:
        return self.games_won / self.games_played if self.games_played else 0.0


def test_agent_base_reports_no_wins() -> None:
    agent = Agent()
    assert agent.games_won == 0
    assert agent.win_rate() == 0.0
    assert RandomAgent().win_rate() == 0.0


def test_training_stats_come_from_any_agent() -> None:
    white = ScoringRandomAgent(seed=3)
    session = GameSession(white_agent=white, black_agent=RandomAgent(np.random.default_rng(4)))
    history = session.train(10)

    last = history[-1]
    assert white.games_played == 10
    assert last.white_games_won == white.games_won
    assert last.white_win_rate == white.win_rate()
    assert last.black_games_won == 0
