"""Core game logic for Hexapawn."""

from .state import BoardState, Coordinate, GameResult, Move, Side
from .rules import (
    BOARD_SIZE,
    IllegalMoveError,
    apply_move,
    canonical_key,
    enumerate_legal_moves,
    format_board,
    initialize_game_state,
    state_from_layout,
    winner_of,
)

__all__ = [
    "BoardState",
    "Coordinate",
    "GameResult",
    "Move",
    "Side",
    "BOARD_SIZE",
    "IllegalMoveError",
    "apply_move",
    "canonical_key",
    "enumerate_legal_moves",
    "format_board",
    "initialize_game_state",
    "state_from_layout",
    "winner_of",
]
