class GameException(Exception):
    """Base exception for game-related errors."""
    pass


class IllegalMove(GameException):
    """Raised when a move violates the rules for the given state."""
    pass


class InvalidPosition(IllegalMove):
    """Raised when a board or cell index is off the grid."""
    pass


class GameEnded(IllegalMove):
    """Raised when trying to move in a decided game."""
    pass


class DoublePending(IllegalMove):
    """Raised when trying to move while a double awaits an answer."""
    pass


class WrongBoard(IllegalMove):
    """Raised when the move ignores the forced board."""
    pass


class BoardDecided(IllegalMove):
    """Raised when trying to play into a won or drawn local board."""
    pass


class CellOccupied(IllegalMove):
    """Raised when trying to move to an occupied cell."""
    pass


class GameNotFinished(GameException):
    """Raised when recording the result of a game still in progress."""
    pass


class StatsNotFound(GameException):
    """Raised when no statistics record exists for a storage key."""
    pass
