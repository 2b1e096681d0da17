"""
errors raised by the game engine
"""


class TicTacToeError(Exception):
    """base for all engine errors"""
    pass


class InvalidCoordinate(TicTacToeError, ValueError):
    """row/col outside the 3x3 grid; caller bug, not a user mistake"""
    def __init__(self, row, col):
        self.row = row
        self.col = col
        super().__init__(f"Invalid position ({row}, {col}). Must be 0-2.")
