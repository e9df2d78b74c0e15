from abc import ABC, abstractmethod

from tic_tac_toe.exception import InvalidMoveError
from tic_tac_toe.game import Game


class Ui(ABC):
    def __init__(self, game: Game) -> None:
        self._game = game

    @property
    def game(self) -> Game:
        return self._game

    def run(self) -> None:
        """Play the game to the end: ask for moves until someone wins or the board fills up."""
        self._render_board()
        while not self._game.is_over():
            index = self._read_position()
            try:
                self._game.apply_move(index)
            except InvalidMoveError as e:
                self._on_input_error(e)
                continue
            self._render_board()

        if self._game.is_draw():
            self._show_end_message("It's a cat's game!")
        else:
            self._show_end_message(f"{self._game.winner()} wins!")

    @abstractmethod
    def _read_position(self) -> int:
        """Return a zero-based cell index that is inside the board."""

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
