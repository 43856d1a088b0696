from __future__ import annotations

from typing import Optional

import numpy as np

from hexapawn.core import BoardState, GameResult, Move, Side, enumerate_legal_moves


class NoLegalMovesError(ValueError):
    pass


class Agent:
    """Agent interface: picks moves and optionally learns from finished games."""

    games_won = 0

    def select_move(self, state: BoardState) -> Move:
        raise NotImplementedError

    def start_new_game(self) -> None:
        """Forget anything recorded for the game in progress."""

    def learn(self, result: GameResult, side: Side) -> None:
        """Consume the outcome of a finished game played as ``side``."""

    def win_rate(self) -> float:
        return 0.0


class RandomAgent(Agent):
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def select_move(self, state: BoardState) -> Move:
        moves = enumerate_legal_moves(state)
        if not moves:
            raise NoLegalMovesError("No legal moves available.")
        return moves[int(self.rng.integers(0, len(moves)))]
