"""MENACE-style learner: one matchbox of beads per position seen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import numpy as np

from hexapawn.core import BoardState, GameResult, Move, Side, canonical_key, enumerate_legal_moves, winner_of

from .base import Agent, NoLegalMovesError

logger = logging.getLogger(__name__)

WeightTable = Dict[str, Dict[Move, int]]
HistoryEntry = Tuple[str, Move]


@dataclass
class MenaceConfig:
    initial_beads: int = 3
    reward_for_win: int = 3
    penalty_for_loss: int = 1
    reward_for_draw: int = 1
    seed: Optional[int] = None


class MenaceAgent(Agent):
    def __init__(self, config: Optional[MenaceConfig] = None) -> None:
        self.config = config or MenaceConfig()
        self._rng = np.random.default_rng(self.config.seed)
        self._weights: WeightTable = {}
        self._history: List[HistoryEntry] = []

        self.games_played = 0
        self.games_won = 0
        self.games_lost = 0
        self.games_drawn = 0

    def select_move(self, state: BoardState) -> Move:
        """Draw a move with probability proportional to its bead count.

        Positions are seeded lazily with ``initial_beads`` per legal move. When
        every legal move has run out of beads each one is given a single bead
        again, so the agent always has something to play.
        """
        legal_moves = enumerate_legal_moves(state)
        if not legal_moves:
            raise NoLegalMovesError("No legal moves available.")

        key = canonical_key(state)
        matchbox = self._weights.get(key)
        if matchbox is None:
            matchbox = {move: self.config.initial_beads for move in legal_moves}
            self._weights[key] = matchbox
            logger.debug("New matchbox %s with %d moves", key, len(matchbox))

        candidates = [(move, weight) for move, weight in matchbox.items() if move in legal_moves]
        if all(weight <= 0 for _, weight in candidates):
            logger.debug("Matchbox %s is empty, refilling with one bead per move", key)
            for move in legal_moves:
                matchbox[move] = 1
            candidates = [(move, weight) for move, weight in matchbox.items() if move in legal_moves]

        total = sum(max(0, weight) for _, weight in candidates)
        choice = int(self._rng.integers(0, total))

        selected = candidates[0][0]
        cumulative = 0
        for move, weight in candidates:
            if weight <= 0:
                continue
            cumulative += weight
            if choice < cumulative:
                selected = move
                break

        self._history.append((key, selected))
        return selected

    def learn(self, result: GameResult, side: Side) -> None:
        if result == GameResult.ONGOING:
            raise ValueError("Cannot learn from a game that is still in progress.")

        self.games_played += 1
        if result == GameResult.DRAW:
            adjustment = self.config.reward_for_draw
            self.games_drawn += 1
        elif winner_of(result) == side:
            adjustment = self.config.reward_for_win
            self.games_won += 1
        else:
            adjustment = -self.config.penalty_for_loss
            self.games_lost += 1

        for key, move in self._history:
            matchbox = self._weights.get(key)
            if matchbox is None or move not in matchbox:
                continue
            matchbox[move] = max(0, matchbox[move] + adjustment)

        logger.debug(
            "%s learned %s over %d moves (adjustment %+d)",
            side.name,
            result.value,
            len(self._history),
            adjustment,
        )
        self._history.clear()

    def start_new_game(self) -> None:
        self._history.clear()

    def reset_learning(self) -> None:
        self._weights.clear()
        self._history.clear()
        self.games_played = 0
        self.games_won = 0
        self.games_lost = 0
        self.games_drawn = 0

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def known_positions(self) -> List[str]:
        return list(self._weights.keys())

    def move_weights(self, key: str) -> Optional[Dict[Move, int]]:
        matchbox = self._weights.get(key)
        if matchbox is None:
            return None
        return dict(matchbox)

    def snapshot(self) -> Dict[str, Dict[str, int]]:
        """Bead counts per position with moves rendered as text, keys sorted."""
        return {
            key: {str(move): weight for move, weight in self._weights[key].items()}
            for key in sorted(self._weights)
        }

    def game_history(self) -> List[HistoryEntry]:
        return list(self._history)

    def learning_stats(self) -> Tuple[int, int]:
        """Return ``(states_learned, total_move_options)``."""
        return len(self._weights), sum(len(matchbox) for matchbox in self._weights.values())

    def win_rate(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.games_won / self.games_played
