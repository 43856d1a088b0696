from __future__ import annotations

import copy
from dataclasses import dataclass

from hexapawn.agents import Agent
from hexapawn.core import GameResult, Side, apply_move, initialize_game_state


@dataclass
class EvaluationResult:
    games_played: int
    white_wins: int
    black_wins: int
    draws: int
    average_length: float

    def winrate_white(self) -> float:
        return self.white_wins / max(1, self.games_played)

    def winrate_black(self) -> float:
        return self.black_wins / max(1, self.games_played)


def evaluate_agents(
    agent_white: Agent,
    agent_black: Agent,
    *,
    episodes: int,
) -> EvaluationResult:
    """Play ``episodes`` games between copies of the agents.

    The agents passed in are left exactly as they were: no new positions, no
    bead changes and no draws taken from their random generators.
    """
    agents = {Side.WHITE: copy.deepcopy(agent_white), Side.BLACK: copy.deepcopy(agent_black)}

    white_wins = 0
    black_wins = 0
    draws = 0
    total_ply = 0

    for _ in range(episodes):
        state = initialize_game_state()
        for agent in agents.values():
            agent.start_new_game()
        ply = 0

        while not state.is_terminal:
            move = agents[state.current_side].select_move(state)
            state = apply_move(state, move)
            ply += 1

        total_ply += ply
        if state.result == GameResult.WHITE_WIN:
            white_wins += 1
        elif state.result == GameResult.BLACK_WIN:
            black_wins += 1
        else:
            draws += 1

    average_length = total_ply / max(1, episodes)
    return EvaluationResult(
        games_played=episodes,
        white_wins=white_wins,
        black_wins=black_wins,
        draws=draws,
        average_length=average_length,
    )
