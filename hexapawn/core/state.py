from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

SIDE_SYMBOLS = {0: ".", 1: "W", -1: "B"}


class Side(IntEnum):
    """Pawn colour; the value doubles as the forward row direction."""

    WHITE = 1
    BLACK = -1
    NONE = 0

    @property
    def opponent(self) -> "Side":
        if self == Side.NONE:
            raise ValueError("Side.NONE has no opponent.")
        return Side(-int(self))

    @property
    def symbol(self) -> str:
        return SIDE_SYMBOLS[int(self)]

    @property
    def goal_row(self) -> int:
        if self == Side.NONE:
            raise ValueError("Side.NONE has no goal row.")
        return 2 if self == Side.WHITE else 0


class GameResult(Enum):
    ONGOING = "ongoing"
    WHITE_WIN = "white_win"
    BLACK_WIN = "black_win"
    # Kept for completeness; the rules never produce it.
    DRAW = "draw"

    @staticmethod
    def win_for(side: Side) -> "GameResult":
        if side == Side.WHITE:
            return GameResult.WHITE_WIN
        if side == Side.BLACK:
            return GameResult.BLACK_WIN
        raise ValueError("Side.NONE cannot win.")


@dataclass(frozen=True)
class Coordinate:
    row: int
    col: int

    def is_valid(self) -> bool:
        return 0 <= self.row < 3 and 0 <= self.col < 3

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Move:
    origin: Coordinate
    target: Coordinate
    # Descriptive only: two moves with the same squares are the same move.
    is_capture: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        joiner = "x" if self.is_capture else "->"
        return f"{self.origin}{joiner}{self.target}"


@dataclass(frozen=True, eq=False)
class BoardState:
    board: BoardArray  # shape (3, 3), dtype=np.int8, values Side
    current_side: Side = Side.WHITE
    result: GameResult = GameResult.ONGOING

    def __post_init__(self) -> None:
        board = np.array(self.board, dtype=np.int8)
        if board.shape != (3, 3):
            raise ValueError(f"Board must have shape (3, 3), got {board.shape}.")
        board.flags.writeable = False
        object.__setattr__(self, "board", board)
        object.__setattr__(self, "current_side", Side(self.current_side))
        if self.current_side == Side.NONE:
            raise ValueError("Side.NONE cannot hold the turn.")

    @property
    def is_terminal(self) -> bool:
        return self.result != GameResult.ONGOING

    def piece_at(self, coord: Coordinate) -> Side:
        if not coord.is_valid():
            return Side.NONE
        return Side(int(self.board[coord.row, coord.col]))

    def occupied_positions(self, side: Side) -> Iterable[Coordinate]:
        # Row-major, which fixes the order of enumerate_legal_moves.
        for r, c in np.argwhere(self.board == int(side)):
            yield Coordinate(int(r), int(c))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return (
            self.current_side == other.current_side
            and self.result == other.result
            and np.array_equal(self.board, other.board)
        )

    def __hash__(self) -> int:
        return hash((self.board.tobytes(), int(self.current_side), self.result))

    def __repr__(self) -> str:
        board_str = "\n".join("".join(SIDE_SYMBOLS[int(cell)] for cell in row) for row in self.board)
        return (
            f"BoardState(current={self.current_side.name}, result={self.result.name})\n"
            f"{board_str}"
        )
