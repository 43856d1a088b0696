"""Hexapawn with MENACE learning agents."""

from . import agents, core, evaluation, orchestration
from .agents import Agent, MenaceAgent, MenaceConfig, NoLegalMovesError, RandomAgent
from .core import (
    BoardState,
    Coordinate,
    GameResult,
    IllegalMoveError,
    Move,
    Side,
    apply_move,
    canonical_key,
    enumerate_legal_moves,
    initialize_game_state,
)
from .evaluation import EvaluationResult, evaluate_agents
from .orchestration import GameSession, MissingAgentError, TrainingResult

__all__ = [
    "agents",
    "core",
    "evaluation",
    "orchestration",
    "Agent",
    "MenaceAgent",
    "MenaceConfig",
    "NoLegalMovesError",
    "RandomAgent",
    "BoardState",
    "Coordinate",
    "GameResult",
    "IllegalMoveError",
    "Move",
    "Side",
    "apply_move",
    "canonical_key",
    "enumerate_legal_moves",
    "initialize_game_state",
    "EvaluationResult",
    "evaluate_agents",
    "GameSession",
    "MissingAgentError",
    "TrainingResult",
]
