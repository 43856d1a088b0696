from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, List, Optional

from hexapawn.agents import Agent
from hexapawn.core import (
    BoardState,
    GameResult,
    Move,
    Side,
    apply_move,
    canonical_key,
    enumerate_legal_moves,
    initialize_game_state,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[BoardState], None]
MoveListener = Callable[[Move, Side], None]
GameEndListener = Callable[[GameResult], None]
ProgressCallback = Callable[[int, GameResult], None]


class MissingAgentError(ValueError):
    pass


@dataclass
class TrainingResult:
    game_number: int
    result: GameResult
    white_win_rate: float
    black_win_rate: float
    white_games_won: int
    black_games_won: int
    total_games_played: int

    def as_dict(self) -> dict:
        return {
            "game_number": self.game_number,
            "result": self.result.value,
            "white_win_rate": self.white_win_rate,
            "black_win_rate": self.black_win_rate,
            "white_games_won": self.white_games_won,
            "black_games_won": self.black_games_won,
            "total_games_played": self.total_games_played,
        }


class GameSession:
    """Owns the current game and up to one agent per side.

    A side whose agent is ``None`` is driven from outside through
    :meth:`make_move`. When a move ends the game every attached agent learns
    from the result.
    """

    def __init__(self, white_agent: Optional[Agent] = None, black_agent: Optional[Agent] = None) -> None:
        self.white_agent = white_agent
        self.black_agent = black_agent
        self._state = initialize_game_state()
        self._lock = threading.RLock()
        self._state_listeners: List[StateListener] = []
        self._move_listeners: List[MoveListener] = []
        self._game_end_listeners: List[GameEndListener] = []

    @property
    def state(self) -> BoardState:
        return self._state

    def legal_moves(self) -> List[Move]:
        return enumerate_legal_moves(self._state)

    def current_key(self) -> str:
        return canonical_key(self._state)

    def agent_for(self, side: Side) -> Optional[Agent]:
        if side == Side.WHITE:
            return self.white_agent
        if side == Side.BLACK:
            return self.black_agent
        return None

    def add_state_listener(self, listener: StateListener) -> None:
        self._state_listeners.append(listener)

    def add_move_listener(self, listener: MoveListener) -> None:
        self._move_listeners.append(listener)

    def add_game_end_listener(self, listener: GameEndListener) -> None:
        self._game_end_listeners.append(listener)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def start_new_game(self) -> None:
        with self._lock:
            self._state = initialize_game_state()
            for agent in self._agents():
                agent.start_new_game()
            self._notify_state()

    def make_move(self, move: Move) -> bool:
        with self._lock:
            if self._state.is_terminal:
                return False
            if move not in enumerate_legal_moves(self._state):
                return False

            mover = self._state.current_side
            self._state = apply_move(self._state, move)

            for listener in self._move_listeners:
                listener(move, mover)
            self._notify_state()

            if self._state.is_terminal:
                result = self._state.result
                if self.white_agent is not None:
                    self.white_agent.learn(result, Side.WHITE)
                if self.black_agent is not None:
                    self.black_agent.learn(result, Side.BLACK)
                logger.debug("Game ended: %s", result.value)
                for listener in self._game_end_listeners:
                    listener(result)
            return True

    def make_ai_move(self) -> bool:
        with self._lock:
            if self._state.is_terminal:
                return False
            agent = self.agent_for(self._state.current_side)
            if agent is None:
                return False
            move = agent.select_move(self._state)
            return self.make_move(move)

    def play_one_game(self) -> GameResult:
        with self._lock:
            while not self._state.is_terminal:
                if not self.make_ai_move():
                    raise MissingAgentError(
                        f"No agent attached for {self._state.current_side.name}."
                    )
            return self._state.result

    def train(self, games: int, progress_callback: Optional[ProgressCallback] = None) -> List[TrainingResult]:
        results: List[TrainingResult] = []
        with self._lock:
            for index in range(games):
                self.start_new_game()
                result = self.play_one_game()
                game_number = index + 1
                results.append(
                    TrainingResult(
                        game_number=game_number,
                        result=result,
                        white_win_rate=_win_rate(self.white_agent),
                        black_win_rate=_win_rate(self.black_agent),
                        white_games_won=_games_won(self.white_agent),
                        black_games_won=_games_won(self.black_agent),
                        total_games_played=game_number,
                    )
                )
                if progress_callback is not None:
                    progress_callback(game_number, result)
        logger.info("Trained for %d games", games)
        return results

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _agents(self) -> List[Agent]:
        return [agent for agent in (self.white_agent, self.black_agent) if agent is not None]

    def _notify_state(self) -> None:
        for listener in self._state_listeners:
            listener(self._state)


def _win_rate(agent: Optional[Agent]) -> float:
    return agent.win_rate() if agent is not None else 0.0


def _games_won(agent: Optional[Agent]) -> int:
    return agent.games_won if agent is not None else 0
