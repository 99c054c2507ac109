"""
Search module for TicTacToe.
The AI opponent: minimax with alpha-beta pruning over a game tree.
"""

from .config import SearchConfig
from .search_node import SearchNode
from .ai_player import AIPlayer, SearchResult
