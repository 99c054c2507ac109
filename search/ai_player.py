"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from logic.board import Board, Cell, apply_move, count_empty, legal_moves
from logic.win_checker import is_terminal, is_win

from .config import SearchConfig
from .search_node import SearchNode


logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """What one decision produced."""
    move: int                           # 1-based position chosen
    value: int                          # Utility of that move
    nodes_explored: int                 # Nodes entered, root included
    tree: Optional[SearchNode] = None   # Root of the search tree, if kept


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search runs all the way to the end of the game, so the AI will
    win if possible, block the opponent if needed, and never lose.
    Moves are tried in ascending position order and the first move with
    the best value wins ties.
    """

    def __init__(self, config: Optional[SearchConfig] = None, keep_tree: Optional[bool] = None):
        """
        Initialize the AI player.

        Args:
            config: Search configuration. Uses defaults if not provided.
            keep_tree: Keep the search tree of the last decision.
                Defaults to config.KEEP_TREE.
        """
        self.config = config or SearchConfig()
        self.keep_tree = self.config.KEEP_TREE if keep_tree is None else keep_tree

        # Keep track of how many nodes we've visited (for debugging)
        self.nodes_explored = 0
        self.last_tree: Optional[SearchNode] = None

    def choose_move(self, board: Board, computer_symbol: Cell, human_symbol: Cell) -> int:
        """
        Choose the computer's move.

        Args:
            board: Current board. Must not be terminal.
            computer_symbol: Symbol the AI plays (maximizing).
            human_symbol: Symbol the human plays (minimizing).

        Returns:
            1-based position of the chosen empty cell.

        Raises:
            ValueError: If the game is already over or the symbols are
                not the X/O pair.
        """
        result = self.get_best_move(board, computer_symbol, human_symbol)

        if result is None:
            raise ValueError("No move available: the game is already over")

        return result.move

    def get_best_move(
        self,
        board: Board,
        computer_symbol: Cell,
        human_symbol: Cell
    ) -> Optional[SearchResult]:
        """
        Run the search and return the full result.

        Returns:
            SearchResult, or None if the board is already terminal.
        """
        self._check_symbols(computer_symbol, human_symbol)

        self.nodes_explored = 0
        self.last_tree = None

        if is_terminal(board):
            logger.warning("get_best_move called on a finished game")
            return None

        root = SearchNode(board=board)
        self.nodes_explored = 1  # The root

        # Search until every cell is filled
        depth = count_empty(board)

        best_value = self.config.ALPHA_INIT
        best_move = None

        for move in legal_moves(board):
            child = root.add_child(apply_move(board, move, computer_symbol), move)

            value = self._alpha_beta(
                child,
                depth - 1,
                self.config.ALPHA_INIT,
                self.config.BETA_INIT,
                False,
                computer_symbol,
                human_symbol,
            )

            if value > best_value:
                best_value = value
                best_move = move

        root.value = best_value

        logger.debug(
            "AI evaluated %d nodes. Best move: %d (value: %d)",
            self.nodes_explored, best_move, best_value
        )

        if self.keep_tree:
            self.last_tree = root

        return SearchResult(
            move=best_move,
            value=best_value,
            nodes_explored=self.nodes_explored,
            tree=root if self.keep_tree else None,
        )

    def utility(self, board: Board, computer_symbol: Cell, human_symbol: Cell) -> int:
        """
        Score a board from the computer's point of view.

        Returns:
            WIN_SCORE, LOSS_SCORE, or DRAW_SCORE (also used for
            unfinished boards at the depth limit).
        """
        if is_win(board, computer_symbol):
            return self.config.WIN_SCORE
        if is_win(board, human_symbol):
            return self.config.LOSS_SCORE
        return self.config.DRAW_SCORE

    def _alpha_beta(
        self,
        node: SearchNode,
        depth: int,
        alpha: int,
        beta: int,
        is_maximizing: bool,
        computer_symbol: Cell,
        human_symbol: Cell
    ) -> int:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            node: Node to evaluate. Children are added to it as moves
                are explored.
            depth: How many more plies to search.
            is_maximizing: True if it is the computer's turn.
            alpha: Best value the maximizer can guarantee so far.
            beta: Best value the minimizer can guarantee so far.

        Returns:
            The value of the position.
        """
        self.nodes_explored += 1
        board = node.board

        if is_terminal(board) or depth == 0:
            node.value = self.utility(board, computer_symbol, human_symbol)
            return node.value

        player = computer_symbol if is_maximizing else human_symbol

        if is_maximizing:
            best_value = self.config.ALPHA_INIT
            for move in legal_moves(board):
                child = node.add_child(apply_move(board, move, player), move)
                value = self._alpha_beta(
                    child, depth - 1, alpha, beta, False, computer_symbol, human_symbol
                )
                best_value = max(best_value, value)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break  # Prune
        else:
            best_value = self.config.BETA_INIT
            for move in legal_moves(board):
                child = node.add_child(apply_move(board, move, player), move)
                value = self._alpha_beta(
                    child, depth - 1, alpha, beta, True, computer_symbol, human_symbol
                )
                best_value = min(best_value, value)
                beta = min(beta, value)
                if beta <= alpha:
                    break  # Prune

        node.value = best_value
        return best_value

    def _check_symbols(self, computer_symbol: Cell, human_symbol: Cell):
        """Both sides must be the complementary X/O pair."""
        if computer_symbol == Cell.EMPTY or human_symbol != computer_symbol.opposite():
            raise ValueError(
                f"Invalid symbols: computer={computer_symbol}, human={human_symbol}"
            )
