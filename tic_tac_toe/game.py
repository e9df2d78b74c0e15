import logging

from tic_tac_toe.board import BOARD_SIZE, Board
from tic_tac_toe.exception import InvalidMoveError
from tic_tac_toe.mark import Mark

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, size: int = BOARD_SIZE) -> None:
        self._board = Board(size)
        self._current_mark = Mark.FIRST

    @property
    def board(self) -> Board:
        return self._board

    @property
    def current_mark(self) -> Mark:
        return self._current_mark

    def apply_move(self, index: int) -> None:
        if self.is_over():
            raise InvalidMoveError("Game over")

        if not (0 <= index < self._board.size * self._board.size):
            raise IndexError("Move out of bounds.")

        if self._board.cell(index) is not Mark.EMPTY:
            raise InvalidMoveError("Cell occupied")

        self._board.place(index, self._current_mark)
        logger.debug("Player %s took cell %d", self._current_mark, index)

        if self.is_over():
            logger.debug("Game finished, winner: %r", self.winner())
        self._current_mark = self._current_mark.opposite()

    def winner(self) -> Mark:
        return self._board.winner()

    def is_over(self) -> bool:
        return self.winner() is not Mark.EMPTY or self._board.is_full()

    def is_draw(self) -> bool:
        return self._board.is_full() and self.winner() is Mark.EMPTY
