"""
Main script for console TicTacToe.

This script ties together:
- Logic (board, game state, input validation)
- Search (the alpha-beta AI opponent)
- UI (console rendering and prompts)

Run this script to play TicTacToe against the computer!
"""

import argparse
import logging
from enum import Enum
from typing import List, Optional

from logic.board import Board, Cell, board_from_string
from logic.game_state import GameState, is_legal_position
from logic.move_validator import MoveValidator
from logic.win_checker import is_terminal
from search.ai_player import AIPlayer
from ui import ConsoleUI


logger = logging.getLogger(__name__)


class Phase(Enum):
    """Where the game loop is."""
    AWAITING_SYMBOL_CHOICE = "awaiting_symbol_choice"
    AWAITING_MOVE = "awaiting_move"
    GAME_OVER = "game_over"


class TicTacToeGame:
    """
    Main controller for a game against the computer.

    Game flow:
    1. Human chooses X or O (X moves first)
    2. Human types a position, or the AI searches for its move
    3. The new state replaces the old one
    4. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        ui: Optional[ConsoleUI] = None,
        ai: Optional[AIPlayer] = None,
        human_player: Optional[Cell] = None,
        board: Optional[Board] = None,
        show_tree: bool = False
    ):
        """
        Initialize the game.

        Args:
            ui: Console UI. Uses input()/print() if not provided.
            ai: AI opponent. A fresh AIPlayer if not provided.
            human_player: Skip the symbol prompt and play this symbol.
            board: Starting position (defaults to an empty board).
            show_tree: Print the AI's candidate moves after each decision.
        """
        self.ui = ui or ConsoleUI()
        self.show_tree = show_tree
        self.ai = ai or AIPlayer(keep_tree=show_tree)
        self.validator = MoveValidator()

        self.start_board = board
        self.game_state: Optional[GameState] = None
        self.phase = Phase.AWAITING_SYMBOL_CHOICE

        if human_player is not None:
            self._start(human_player)

    def run(self) -> GameState:
        """Play until the game is over and return the final state."""
        while self.phase != Phase.GAME_OVER:
            self.step()

        self._show_game_result()
        return self.game_state

    def step(self):
        """Advance the state machine by one symbol choice or one move."""
        if self.phase == Phase.AWAITING_SYMBOL_CHOICE:
            self._choose_symbol()
        elif self.phase == Phase.AWAITING_MOVE:
            self._play_turn()

    def _choose_symbol(self):
        """Ask until the human answers exactly X or O."""
        choice = self.validator.validate_symbol(self.ui.ask_symbol())
        while not choice.is_valid:
            choice = self.validator.validate_symbol(self.ui.ask_symbol(retry=True))

        self._start(choice.symbol)

    def _start(self, human_player: Cell):
        self.game_state = GameState.new(human_player, self.start_board)
        logger.info("New game: human=%s, computer=%s, %s",
                    human_player.value, self.game_state.computer_player.value, self.game_state)

        self.ui.show_welcome(human_player, self.game_state.computer_player)
        self._update_phase()

    def _play_turn(self):
        self.ui.show_board(self.game_state.board)

        if self.game_state.is_human_turn:
            self._human_move()
        else:
            self._ai_move()

        self._update_phase()

    def _human_move(self):
        """Read moves until a legal one is entered, then apply it."""
        while True:
            result = self.validator.validate_input(self.game_state, self.ui.ask_move())
            if result.is_valid:
                break
            self.ui.show(result.error_message)

        logger.debug("Human plays %d", result.position)
        self.game_state = self.game_state.make_move(result.position)

    def _ai_move(self):
        """Let the AI choose and apply its move."""
        self.ui.show(self.ui.config.AI_THINKING)

        result = self.ai.get_best_move(
            self.game_state.board,
            self.game_state.computer_player,
            self.game_state.human_player,
        )

        self.ui.show_ai_move(result.move, result.nodes_explored)
        if self.show_tree and result.tree is not None:
            self.ui.show_search_tree(result.tree)

        self.game_state = self.game_state.make_move(result.move)

    def _update_phase(self):
        if self.game_state.is_game_over:
            self.phase = Phase.GAME_OVER
        else:
            self.phase = Phase.AWAITING_MOVE

    def _show_game_result(self):
        """Show the final board and result."""
        self.ui.show_board(self.game_state.board)
        self.ui.show_result(
            self.game_state.winner,
            self.game_state.human_player,
            self.game_state.winning_line,
        )
        logger.info("Game over: %s", self.game_state)


def parse_board(text: str) -> Board:
    """argparse type for --board: a playable, legal 9-cell position."""
    try:
        board = board_from_string(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

    if not is_legal_position(board):
        raise argparse.ArgumentTypeError(f"{text!r} cannot arise from alternating play")
    if is_terminal(board):
        raise argparse.ArgumentTypeError(f"{text!r} is already a finished game")
    return board


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicTacToe against an alpha-beta AI")
    parser.add_argument(
        "--human",
        choices=["X", "O"],
        help="Play this symbol instead of being asked"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Let the AI play first (human plays O)"
    )
    parser.add_argument(
        "--board",
        type=parse_board,
        help="Start from a position, e.g. XX_OO____ ('_' for empty)"
    )
    parser.add_argument(
        "--show-tree",
        action="store_true",
        help="Print the value of each candidate move after AI decisions"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity"
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s: %(message)s"
    )

    # Determine players
    human_player = None
    if args.human:
        human_player = Cell.from_symbol(args.human)
    elif args.ai_first:
        human_player = Cell.O

    ui = ConsoleUI()
    game = TicTacToeGame(
        ui=ui,
        human_player=human_player,
        board=args.board,
        show_tree=args.show_tree,
    )

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        ui.show("\n\nGame interrupted by user.")
    finally:
        ui.show("Goodbye!")


if __name__ == "__main__":
    main()
