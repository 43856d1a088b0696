from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .state import SIDE_SYMBOLS, BoardArray, BoardState, Coordinate, GameResult, Move, Side

BOARD_SIZE = 3
# Column offsets tried per pawn: straight advance, then the two diagonals.
STEP_COLUMNS: Tuple[int, ...] = (0, -1, 1)
KEY_SEPARATOR = "/"

_SYMBOL_SIDES = {symbol: Side(value) for value, symbol in SIDE_SYMBOLS.items()}


class IllegalMoveError(ValueError):
    pass


def initialize_game_state() -> BoardState:
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    board[0, :] = Side.WHITE
    board[BOARD_SIZE - 1, :] = Side.BLACK
    return BoardState(board=board, current_side=Side.WHITE, result=GameResult.ONGOING)


def state_from_layout(
    rows: Sequence[str],
    current_side: Side = Side.WHITE,
    result: GameResult = GameResult.ONGOING,
) -> BoardState:
    """Build a state from three strings of ``W``/``B``/``.``, row 0 first."""
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError("Layout must be three rows of three squares.")
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    for r, row in enumerate(rows):
        for c, symbol in enumerate(row):
            if symbol not in _SYMBOL_SIDES:
                raise ValueError(f"Unknown square symbol {symbol!r}.")
            board[r, c] = _SYMBOL_SIDES[symbol]
    return BoardState(board=board, current_side=current_side, result=result)


def enumerate_legal_moves(state: BoardState) -> List[Move]:
    if state.is_terminal:
        return []
    return _moves_for(state)


def apply_move(state: BoardState, move: Move) -> BoardState:
    if state.is_terminal:
        raise IllegalMoveError("Cannot apply a move to a terminal state.")
    if move not in enumerate_legal_moves(state):
        raise IllegalMoveError(f"Move {move} is not legal for {state.current_side.name}.")

    mover = state.current_side
    board = state.board.copy()
    board[move.target.row, move.target.col] = mover
    board[move.origin.row, move.origin.col] = Side.NONE

    after = BoardState(board=board, current_side=mover.opponent)
    return replace(after, result=_evaluate_terminal(after, mover))


def canonical_key(state: BoardState) -> str:
    """Row-major occupancy plus the side to move, e.g. ``WWW...BBB/W``."""
    squares = "".join(SIDE_SYMBOLS[int(cell)] for cell in state.board.flat)
    return f"{squares}{KEY_SEPARATOR}{state.current_side.symbol}"


def format_board(state: BoardState) -> str:
    return "\n".join("".join(SIDE_SYMBOLS[int(cell)] for cell in row) for row in state.board)


def _moves_for(state: BoardState) -> List[Move]:
    side = state.current_side
    opponent = side.opponent
    moves: List[Move] = []
    for origin in state.occupied_positions(side):
        for dc in STEP_COLUMNS:
            target = Coordinate(origin.row + int(side), origin.col + dc)
            if not target.is_valid():
                continue
            occupant = state.piece_at(target)
            if dc == 0 and occupant == Side.NONE:
                moves.append(Move(origin, target, is_capture=False))
            elif dc != 0 and occupant == opponent:
                moves.append(Move(origin, target, is_capture=True))
    return moves


def _evaluate_terminal(state: BoardState, mover: Side) -> GameResult:
    if _reached_goal(state.board, mover):
        return GameResult.win_for(mover)
    if not _moves_for(state):
        return GameResult.win_for(mover)
    return GameResult.ONGOING


def _reached_goal(board: BoardArray, side: Side) -> bool:
    return bool(np.any(board[side.goal_row, :] == int(side)))


def winner_of(result: GameResult) -> Optional[Side]:
    if result == GameResult.WHITE_WIN:
        return Side.WHITE
    if result == GameResult.BLACK_WIN:
        return Side.BLACK
    return None
