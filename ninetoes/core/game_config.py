"""
Configuration constants for the Ultimate Tic-Tac-Toe engine and its AI.
"""

# Board geometry
BOARD_CELLS = 9
CENTER_CELL = 4
CORNER_CELLS = frozenset({0, 2, 6, 8})

# All 8 winning triples: 3 rows, 3 columns, 2 diagonals.
WIN_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

# Lines through each cell, precomputed for the scorer.
LINES_THROUGH = tuple(
    tuple(line for line in WIN_LINES if cell in line) for cell in range(BOARD_CELLS)
)

# Doubling cube
INITIAL_CUBE_VALUE = 1
MAX_CUBE_VALUE = 64
CUBE_VALUES = frozenset({1, 2, 4, 8, 16, 32, 64})

# Tic-Tac-Ku: first to win this many boards takes the game
BOARDS_TO_WIN = 5

# Move selection
EASY_BLUNDER_CHANCE = 0.15
DIFFICULTY_TOLERANCE = {
    "easy": 50,
    "medium": 10,
    "hard": 3,
}

# Doubling strategy
DOUBLE_BASE_THRESHOLD = 15
DOUBLE_CUBE_FACTOR = 3
DOUBLE_RELUCTANCE = 0.2
ACCEPT_BASE_THRESHOLD = -40
POSITION_CLAMP = 100

# Commentary
COMMENTARY_CHANCE = 0.35
BLOCK_COMMENT_GATE = 0.5
POSITION_SWING = 20

# Move scoring weights
GAME_WIN_SCORE = 1000
LOCAL_WIN_SCORE = {"classic": 100, "tictacku": 120}
META_THREAT_BONUS = 50
LOCAL_BLOCK_SCORE = {"classic": 90, "tictacku": 110}
GAME_BLOCK_SCORE = 500
TWO_IN_A_ROW_SCORE = 15
BLOCK_TWO_SCORE = 12
CENTER_SCORE = 6
CORNER_SCORE = 3
FREE_CHOICE_PENALTY = 20
SEND_TO_THREAT_PENALTY = 25
SEND_TO_OWN_THREAT_BONUS = 8
OPEN_LINE_WEIGHT = 0.5

# Position evaluation
BOARD_VALUE = {"classic": 20, "tictacku": 15}
META_LINE_VALUE = 15
NEAR_WIN_BOARDS = 4
NEAR_WIN_BONUS = 25


def tolerance_for(difficulty: str) -> float:
    """Score band below the best move the AI will still pick from."""
    return DIFFICULTY_TOLERANCE.get(difficulty, DIFFICULTY_TOLERANCE["medium"])


def double_threshold(cube_value: int) -> float:
    """Position score the AI needs before offering a double; rises with the stake."""
    return DOUBLE_BASE_THRESHOLD + DOUBLE_CUBE_FACTOR * cube_value


def accept_threshold(cube_value: int) -> float:
    """Position score above which the AI takes a double; stricter at higher stakes."""
    return ACCEPT_BASE_THRESHOLD + cube_value


def is_valid_index(index: int) -> bool:
    """Check if a board or cell index is on the 3x3 grid."""
    return 0 <= index < BOARD_CELLS
