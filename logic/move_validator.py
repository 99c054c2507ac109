"""
Move validator for TicTacToe.
Validates what the human types before it reaches the game state.
"""

from dataclasses import dataclass
from typing import Optional

from .board import Cell
from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    position: Optional[int] = None
    error_message: Optional[str] = None


@dataclass
class SymbolChoice:
    """Result of validating the human's symbol choice."""
    is_valid: bool
    symbol: Optional[Cell] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe input.

    Rules:
    1. A move is exactly one character, '1' to '9'
    2. Can only place on empty cells
    3. Game must not be over
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def validate_symbol(self, text: str) -> SymbolChoice:
        """
        Validate the answer to "X or O?".

        Only an uppercase X or O is accepted.
        """
        choice = text.strip()
        if choice in ("X", "O"):
            return SymbolChoice(is_valid=True, symbol=Cell(choice))

        return SymbolChoice(is_valid=False, error_message=self.config.SYMBOL_RETRY)

    def validate_input(self, game_state: GameState, text: str) -> ValidationResult:
        """
        Validate a move typed by the human.

        Args:
            game_state: Current game state.
            text: Raw console input.

        Returns:
            ValidationResult with the 1-based position when valid.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        entry = text.strip()
        if len(entry) != 1 or entry not in "123456789":
            return ValidationResult(
                is_valid=False,
                error_message=self.config.INVALID_INPUT
            )

        return self.validate_move(game_state, int(entry))

    def validate_move(self, game_state: GameState, position: int) -> ValidationResult:
        """
        Validate a move by position.

        Args:
            game_state: Current game state.
            position: 1-based position.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not 1 <= position <= self.config.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=self.config.INVALID_INPUT
            )

        if game_state.board[position - 1] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=self.config.POSITION_TAKEN
            )

        return ValidationResult(is_valid=True, position=position)
