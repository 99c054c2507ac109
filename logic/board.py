"""
Board model for TicTacToe.

Board representation: tuple of 9 Cell values, read left-to-right,
top-to-bottom. Positions are 1-based (1-9) everywhere outside this module.

    1 | 2 | 3
   ---+---+---
    4 | 5 | 6
   ---+---+---
    7 | 8 | 9
"""

from enum import Enum
from typing import List, Tuple

from .config import GameConfig


class Cell(Enum):
    """Contents of a single board cell."""
    EMPTY = " "
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the other player symbol."""
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        raise ValueError("An empty cell has no opposite")

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        """Parse 'X' or 'O' into a player symbol."""
        if symbol == "X":
            return cls.X
        if symbol == "O":
            return cls.O
        raise ValueError(f"Invalid player symbol {symbol!r}. Must be 'X' or 'O'.")


Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Return the starting board with every cell empty."""
    return (Cell.EMPTY,) * GameConfig.NUM_CELLS


def is_full(board: Board) -> bool:
    """True if no cell is empty."""
    return all(cell != Cell.EMPTY for cell in board)


def count_empty(board: Board) -> int:
    """Number of empty cells left on the board."""
    return sum(1 for cell in board if cell == Cell.EMPTY)


def legal_moves(board: Board) -> List[int]:
    """Return the 1-based positions of the empty cells, in ascending order."""
    return [i + 1 for i, cell in enumerate(board) if cell == Cell.EMPTY]


def apply_move(board: Board, position: int, player: Cell) -> Board:
    """
    Place a symbol and return the new board.

    The input board is left untouched. The target cell must be empty;
    this is not checked here.

    Args:
        board: Current board.
        position: 1-based position (1-9).
        player: Symbol to place.

    Returns:
        A new board with the cell at position-1 set to player.
    """
    index = position - 1
    return board[:index] + (player,) + board[index + 1:]


def board_from_string(text: str) -> Board:
    """
    Build a board from its compact 9-character form, e.g. "XX_OO____".

    Any of GameConfig.EMPTY_CHARS marks an empty cell.

    Raises:
        ValueError: If the text is not 9 characters or has unknown symbols.
    """
    if len(text) != GameConfig.NUM_CELLS:
        raise ValueError(
            f"Board must have {GameConfig.NUM_CELLS} cells, got {len(text)}"
        )

    cells = []
    for char in text.upper():
        if char in GameConfig.EMPTY_CHARS:
            cells.append(Cell.EMPTY)
        elif char in ("X", "O"):
            cells.append(Cell(char))
        else:
            raise ValueError(f"Unknown cell character {char!r}")
    return tuple(cells)


def board_to_string(board: Board) -> str:
    """Compact 9-character form of a board, '_' for empty cells."""
    return "".join("_" if cell == Cell.EMPTY else cell.value for cell in board)
