"""
Search tree nodes for the TicTacToe AI.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from logic.board import Board


@dataclass
class SearchNode:
    """
    One hypothetical game state reached during the search.

    Each node owns its children. A node is added when the search expands
    a move and is never removed, even if a later sibling triggers a cutoff.
    """
    board: Board
    move: Optional[int] = None      # 1-based move that led here, None for the root
    children: List["SearchNode"] = field(default_factory=list)
    value: Optional[int] = None     # Backed-up value once the node is searched

    def add_child(self, board: Board, move: int) -> "SearchNode":
        """Append a child for the given move and return it."""
        child = SearchNode(board=board, move=move)
        self.children.append(child)
        return child

    def walk(self) -> Iterator["SearchNode"]:
        """Yield this node and all of its descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def count_nodes(self) -> int:
        """Number of nodes in this subtree, including this one."""
        return sum(1 for _ in self.walk())

