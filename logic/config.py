"""
Game configuration for TicTacToe.
Board geometry, turn order, and the texts shown on the console.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9

    # All possible winning lines (0-based cell indices)
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    # X always moves first
    FIRST_PLAYER = "X"

    # Characters accepted for an empty cell in the compact board form
    EMPTY_CHARS = "_.- "

    # ==================== CONSOLE TEXTS ====================
    ROW_SEPARATOR = "---+---+---"
    COLUMN_SEPARATOR = "|"

    SYMBOL_PROMPT = "Do you want to play as X or O? (X goes first): "
    SYMBOL_RETRY = "Invalid choice. Please choose X or O: "
    MOVE_PROMPT = "\nYour move (1-9):"
    INVALID_INPUT = "Invalid input. Enter a number 1-9."
    POSITION_TAKEN = "That position is taken. Try again."
    AI_THINKING = "\nAI is making a move..."

    HUMAN_WINS = "\nCongratulations! You win!"
    AI_WINS = "\nThe AI wins!"
    DRAW = "\nIt's a draw!"
