"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and the move history.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .board import Board, Cell, apply_move, board_to_string, empty_board
from .config import GameConfig
from .win_checker import WinChecker, is_terminal, is_win


_win_checker = WinChecker()


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Cell            # Who made the move
    position: int           # 1-based position (1-9)
    move_number: int        # Which move this is (0-8)


@dataclass(frozen=True)
class GameState:
    """
    The complete state of the TicTacToe game.

    A state is never modified. make_move() returns the next state,
    so the game loop replaces its state once per turn.
    """

    board: Board = field(default_factory=empty_board)

    # Side to move
    current_player: Cell = Cell(GameConfig.FIRST_PLAYER)

    human_player: Cell = Cell.X
    computer_player: Cell = Cell.O

    # Move history
    moves: Tuple[Move, ...] = ()

    @classmethod
    def new(cls, human_player: Cell, board: Optional[Board] = None) -> "GameState":
        """
        Start a game.

        Args:
            human_player: Symbol the human plays.
            board: Optional starting position. The side to move is
                inferred from it (X moves first).
        """
        if human_player == Cell.EMPTY:
            raise ValueError("The human must play X or O")

        if board is None:
            board = empty_board()

        return cls(
            board=board,
            current_player=side_to_move(board),
            human_player=human_player,
            computer_player=human_player.opposite(),
        )

    @property
    def winner(self) -> Optional[Cell]:
        return _win_checker.check_winner(self.board)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return _win_checker.get_winning_line(self.board)

    @property
    def is_draw(self) -> bool:
        return _win_checker.check_draw(self.board)

    @property
    def is_game_over(self) -> bool:
        return is_terminal(self.board)

    @property
    def is_human_turn(self) -> bool:
        return self.current_player == self.human_player

    def make_move(self, position: int) -> "GameState":
        """
        Place the current player's symbol and pass the turn.

        Args:
            position: 1-based position (1-9).

        Returns:
            The next game state.

        Raises:
            ValueError: If the game is over or the cell is not open.
        """
        if self.is_game_over:
            raise ValueError("Game is already over!")

        if not 1 <= position <= GameConfig.NUM_CELLS:
            raise ValueError(f"Invalid position {position}. Must be 1-9.")

        if self.board[position - 1] != Cell.EMPTY:
            raise ValueError(f"Cell {position} is already occupied!")

        move = Move(
            player=self.current_player,
            position=position,
            move_number=len(self.moves),
        )

        return replace(
            self,
            board=apply_move(self.board, position, self.current_player),
            current_player=self.current_player.opposite(),
            moves=self.moves + (move,),
        )

    def __str__(self) -> str:
        return f"GameState({board_to_string(self.board)}, to move: {self.current_player.value})"


def side_to_move(board: Board) -> Cell:
    """Infer side to move from board state (X plays first)."""
    x_count = sum(1 for cell in board if cell == Cell.X)
    o_count = sum(1 for cell in board if cell == Cell.O)
    return Cell.X if x_count == o_count else Cell.O


def is_legal_position(board: Board) -> bool:
    """
    Check if a board could come from alternating play starting with X.

    X has as many symbols as O or one more, and the two players
    cannot both have a line.
    """
    x_count = sum(1 for cell in board if cell == Cell.X)
    o_count = sum(1 for cell in board if cell == Cell.O)

    if not (x_count == o_count or x_count == o_count + 1):
        return False

    return not (is_win(board, Cell.X) and is_win(board, Cell.O))
