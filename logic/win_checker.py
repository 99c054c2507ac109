"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple

from .board import Board, Cell, is_full
from .config import GameConfig


def is_win(board: Board, player: Cell) -> bool:
    """
    Check if a player holds any complete line.

    Args:
        board: The board to check.
        player: Cell.X or Cell.O.

    Returns:
        True if all three cells of some winning line hold player.
    """
    if player == Cell.EMPTY:
        return False

    for a, b, c in GameConfig.WINNING_LINES:
        if board[a] == player and board[b] == player and board[c] == player:
            return True
    return False


def is_terminal(board: Board) -> bool:
    """True if either player has won or the board is full."""
    return is_win(board, Cell.X) or is_win(board, Cell.O) or is_full(board)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same symbol in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = GameConfig.WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: The current board.

        Returns:
            The winning symbol, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Cell]:
        """Return the symbol filling a single line, or None."""
        a, b, c = line
        if board[a] != Cell.EMPTY and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled and nobody has won.
        """
        if self.check_winner(board) is not None:
            return False

        return is_full(board)

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as 1-based positions, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return tuple(index + 1 for index in line)
        return None
