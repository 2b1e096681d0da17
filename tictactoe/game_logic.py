import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, Signal

from .exceptions import InvalidCoordinate

logger = logging.getLogger(__name__)

BOARD_SIZE = 3

# every line that wins: rows, cols, diags
WINNING_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class Cell(Enum):
    """
    state of one square; CROSS and NOUGHT double as the player marks
    """
    EMPTY = ""
    CROSS = "X"
    NOUGHT = "O"

    @property
    def symbol(self):
        return self.value

    def opposite(self):
        """other player's mark"""
        if self is Cell.CROSS:
            return Cell.NOUGHT
        if self is Cell.NOUGHT:
            return Cell.CROSS
        raise ValueError("empty cell has no opposite")


class OutcomeKind(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    round result: in progress, win (with winner), or draw
    """
    kind: OutcomeKind
    winner: Optional[Cell] = None

    @classmethod
    def in_progress(cls):
        return cls(OutcomeKind.IN_PROGRESS)

    @classmethod
    def win(cls, winner):
        return cls(OutcomeKind.WIN, winner)

    @classmethod
    def draw(cls):
        return cls(OutcomeKind.DRAW)

    @property
    def is_concluded(self):
        return self.kind is not OutcomeKind.IN_PROGRESS

    def message(self):
        """text for the result dialog"""
        if self.kind is OutcomeKind.WIN:
            name = "Crosses" if self.winner is Cell.CROSS else "Noughts"
            return name + " Win!"
        if self.kind is OutcomeKind.DRAW:
            return "Draw"
        return ""


@dataclass(frozen=True)
class GameSnapshot:
    """
    read-only copy of everything the ui needs to draw
    """
    board: tuple
    turn: Cell
    crosses_score: int
    noughts_score: int
    outcome: Outcome


class GameLogic(QObject):
    """
    tic-tac-toe rules, turn order and running score
    """
    state_changed = Signal(object)    # GameSnapshot after every change
    game_concluded = Signal(object)   # Outcome when a round ends

    def __init__(self, parent=None):
        """
        init board, turn and counters
        """
        super().__init__(parent)
        self.board_size = BOARD_SIZE
        self.crosses_score = 0
        self.noughts_score = 0
        self._init_round()

    def _init_round(self):
        # fresh board, X starts, no result
        self.game_board = [[Cell.EMPTY for _ in range(self.board_size)]
                           for _ in range(self.board_size)]
        self.turn = Cell.CROSS
        self.result = None

    @property
    def game_over(self):
        return self.result is not None

    def reset_game(self):
        """
        clear board for a new round; scores are kept
        """
        self._init_round()
        logger.debug("board reset, score X=%d O=%d",
                     self.crosses_score, self.noughts_score)
        self.state_changed.emit(self.snapshot())

    def reset_scores(self):
        """
        new match: zero both scores and start a fresh round
        """
        self.crosses_score = 0; self.noughts_score = 0
        logger.info("scores cleared")
        self.reset_game()

    def _check_coords(self, row, col):
        for v in (row, col):
            if isinstance(v, bool) or not isinstance(v, int) \
               or not 0 <= v < self.board_size:
                raise InvalidCoordinate(row, col)

    def cell(self, row, col):
        self._check_coords(row, col)
        return self.game_board[row][col]

    def is_cell_empty(self, row, col):
        return self.cell(row, col) is Cell.EMPTY

    def place_mark(self, row, col):
        """
        put current turn's mark at (row, col)
        returns the new Outcome, or None if the move was ignored
        (occupied cell or round already over)
        """
        self._check_coords(row, col)
        if self.game_over:
            logger.debug("move (%d, %d) ignored, round is over", row, col)
            return None
        if self.game_board[row][col] is not Cell.EMPTY:
            logger.debug("move (%d, %d) ignored, cell taken", row, col)
            return None

        mark = self.turn
        self.game_board[row][col] = mark
        logger.debug("%s placed at (%d, %d)", mark.symbol, row, col)

        outcome = self.evaluate_outcome()
        if outcome.kind is OutcomeKind.WIN:
            # winner keeps the turn until reset
            if mark is Cell.CROSS:
                self.crosses_score += 1
            else:
                self.noughts_score += 1
            self.result = outcome
        elif outcome.kind is OutcomeKind.DRAW:
            self.result = outcome
        else:
            self.turn = mark.opposite()

        if self.result is not None:
            logger.info("round over: %s (X=%d O=%d)", outcome.message(),
                        self.crosses_score, self.noughts_score)
        self.state_changed.emit(self.snapshot())
        if self.result is not None:
            self.game_concluded.emit(outcome)
        return outcome

    def evaluate_outcome(self):
        """
        win for the current turn beats draw, so a winning last move
        on a full board counts as a win
        """
        if self.check_victory():
            return Outcome.win(self.turn)
        if self.check_draw():
            return Outcome.draw()
        return Outcome.in_progress()

    def check_victory(self):
        """
        true if any line is all current-turn marks
        """
        return self.winning_line() is not None

    def winning_line(self):
        # first line fully held by the player on turn
        b = self.game_board
        for line in WINNING_LINES:
            if all(b[r][c] is self.turn for r, c in line):
                return line
        return None

    def check_draw(self):
        """
        no empty cells left
        """
        return all(cell is not Cell.EMPTY
                   for row in self.game_board for cell in row)

    def turn_text(self):
        return "Turn: " + self.turn.symbol

    def score_for(self, mark):
        if mark is Cell.CROSS:
            return self.crosses_score
        if mark is Cell.NOUGHT:
            return self.noughts_score
        raise ValueError(f"no score for {mark}")

    def result_message(self):
        return self.result.message() if self.result else ""

    def snapshot(self):
        """
        immutable copy of the current state
        """
        return GameSnapshot(
            board=tuple(tuple(row) for row in self.game_board),
            turn=self.turn,
            crosses_score=self.crosses_score,
            noughts_score=self.noughts_score,
            outcome=self.result or Outcome.in_progress(),
        )
