"""
Search configuration for the TicTacToe AI.
Scores and bounds used by the alpha-beta search.
"""


class SearchConfig:
    """
    Configuration for the minimax search.
    """

    # ==================== UTILITY SCORES ====================
    # Scored from the computer's point of view
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== ALPHA-BETA BOUNDS ====================
    # Outside the [-10, 10] utility range, so nothing is pruned
    # before a real value is known
    ALPHA_INIT = -1000
    BETA_INIT = 1000

    # ==================== DEBUG SETTINGS ====================
    # Keep the search tree of the last decision (for --show-tree and tests)
    KEEP_TREE = False
