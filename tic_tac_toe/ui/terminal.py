# ruff: noqa: T201

import logging

from tic_tac_toe.game import Game
from tic_tac_toe.ui.ui import Ui

logger = logging.getLogger(__name__)

INVALID_NUMBER_MSG = "Input is not a valid number"


class TerminalUi(Ui):
    def __init__(self, game: Game) -> None:
        super().__init__(game)
        self._max_move = game.board.size * game.board.size

    def _ask_for_move(self) -> None:
        print(f"Player {self._game.current_mark}, enter a cell (1-{self._max_move}): ", end="", flush=True)

    def _read_position(self) -> int:
        # EOFError and KeyboardInterrupt are left to the caller.
        while True:
            self._ask_for_move()
            input_str = input()
            try:
                board_position = self._parse_position(input_str)
            except ValueError as e:
                logger.debug("Rejected input %r: %s", input_str, e)
                self._on_input_error(ValueError(INVALID_NUMBER_MSG))
                continue
            return board_position - 1

    def _parse_position(self, input_str: str) -> int:
        board_position = int(input_str.strip())
        if not (1 <= board_position <= self._max_move):
            msg = f"Not between 1 and {self._max_move}"
            raise ValueError(msg)
        return board_position

    def _render_board(self) -> None:
        print(f"\n{self._game.board.render()}\n", flush=True)

    def _show_end_message(self, message: str) -> None:
        print(message, flush=True)

    def _on_input_error(self, exception: Exception) -> None:
        print(str(exception), flush=True)
