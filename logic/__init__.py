"""
Logic module for TicTacToe.
Handles the board, game state, rules, and input validation.
"""

from .config import GameConfig
from .board import (
    Board,
    Cell,
    apply_move,
    board_from_string,
    board_to_string,
    count_empty,
    empty_board,
    is_full,
    legal_moves,
)
from .win_checker import WinChecker, is_terminal, is_win
from .game_state import GameState, Move
from .move_validator import MoveValidator, ValidationResult

__version__ = "1.0.0"
