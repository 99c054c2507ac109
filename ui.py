"""
TicTacToe console UI.

Shows:
- The board, with position hints while it is still empty
- Prompts for the symbol choice and the human's moves
- The AI's move and how many nodes it explored
- The game result
"""

from typing import Callable, Optional, Tuple

from logic.board import Board, Cell
from logic.config import GameConfig
from search.search_node import SearchNode


def format_cell(cell: Cell, position: int, show_numbers: bool) -> str:
    """
    Format one cell as three characters.

    Args:
        cell: Cell contents.
        position: 1-based position of the cell.
        show_numbers: Show the position in empty cells.
    """
    if cell == Cell.EMPTY:
        return f" {position} " if show_numbers else "   "
    return f" {cell.value} "


def render_board(board: Board, config: Optional[GameConfig] = None) -> str:
    """
    Render the board as text.

    Position numbers are only shown while the whole board is empty.
    """
    config = config or GameConfig()
    show_numbers = all(cell == Cell.EMPTY for cell in board)
    size = config.BOARD_SIZE

    lines = []
    for row in range(size):
        start = row * size
        cells = [
            format_cell(board[index], index + 1, show_numbers)
            for index in range(start, start + size)
        ]
        lines.append(config.COLUMN_SEPARATOR.join(cells))
        if row < size - 1:
            lines.append(config.ROW_SEPARATOR)
    return "\n".join(lines)


class ConsoleUI:
    """
    Console input and output for the game.

    input_func and output_func default to input() and print(); tests
    pass scripted replacements.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None,
        config: Optional[GameConfig] = None
    ):
        self.input_func = input_func or input
        self.output_func = output_func or print
        self.config = config or GameConfig()

    def show(self, text: str = ""):
        self.output_func(text)

    def ask(self, prompt: str) -> str:
        """Read one line. Raises EOFError when input runs out."""
        return self.input_func(prompt)

    def show_board(self, board: Board):
        self.show(render_board(board, self.config))

    def ask_symbol(self, retry: bool = False) -> str:
        prompt = self.config.SYMBOL_RETRY if retry else self.config.SYMBOL_PROMPT
        return self.ask(prompt)

    def ask_move(self) -> str:
        self.show(self.config.MOVE_PROMPT)
        return self.ask("")

    def show_welcome(self, human: Cell, computer: Cell):
        self.show("Welcome to Tic Tac Toe!")
        self.show(f"You are playing as {human.value}.")
        self.show(f"The AI is playing as {computer.value}.")
        self.show("Enter a number from 1-9 to make your move:\n")

    def show_ai_move(self, position: int, nodes_explored: int):
        self.show(f"AI chose position {position}.")
        self.show(f"Nodes explored: {nodes_explored}\n")

    def show_search_tree(self, root: SearchNode):
        """Print the value the search backed up for each candidate move."""
        self.show("Candidate moves:")
        for child in root.children:
            self.show(
                f"  position {child.move}: value {child.value} "
                f"({child.count_nodes()} nodes)"
            )

    def show_result(
        self,
        winner: Optional[Cell],
        human: Cell,
        winning_line: Optional[Tuple[int, int, int]] = None
    ):
        """Print the end-of-game message relative to the human."""
        if winning_line is not None:
            self.show("Winning line: " + "-".join(str(p) for p in winning_line))

        if winner == human:
            self.show(self.config.HUMAN_WINS)
        elif winner is not None:
            self.show(self.config.AI_WINS)
        else:
            self.show(self.config.DRAW)
