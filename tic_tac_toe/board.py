from collections.abc import Sequence
from typing import Final

from tic_tac_toe.mark import Mark

BOARD_SIZE: Final = 3


class Board:
    def __init__(self, size: int = BOARD_SIZE) -> None:
        if size < 1:
            msg = f"Board size must be at least 1, got {size}."
            raise ValueError(msg)
        self._size = size
        self._board: list[list[Mark]] = [[Mark.EMPTY] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Mark]]) -> "Board":
        """Build a board holding exactly the given marks. Any state can be represented, legal or not."""
        board = cls(len(rows))
        if any(len(row) != board.size for row in rows):
            raise ValueError("Board rows must form a square.")
        board._board = [list(row) for row in rows]
        return board

    @property
    def size(self) -> int:
        return self._size

    @property
    def rows(self) -> list[list[Mark]]:
        return [row[:] for row in self._board]

    def cell(self, index: int) -> Mark:
        row, col = divmod(index, self._size)
        return self._board[row][col]

    def place(self, index: int, mark: Mark) -> None:
        """Put ``mark`` on the cell at the row-major ``index``.

        The index must already be validated by the caller to lie in ``[0, size * size)``.
        Occupied cells are overwritten.
        """
        assert 0 <= index < self._size * self._size, f"Index {index} out of range"  # noqa: S101
        row, col = divmod(index, self._size)
        self._board[row][col] = mark

    def is_full(self) -> bool:
        return all(all(cell is not Mark.EMPTY for cell in row) for row in self._board)

    def winner(self) -> Mark:
        lines: list[list[Mark]] = []

        lines.extend(self._board)  # Horizontal lines
        lines.extend([list(col) for col in zip(*self._board, strict=True)])  # Vertical lines
        lines.append([self._board[i][i] for i in range(self._size)])  # First diagonal
        lines.append([self._board[i][self._size - 1 - i] for i in range(self._size)])  # Second diagonal

        for line in lines:
            if line[0] is not Mark.EMPTY and all(cell is line[0] for cell in line[1:]):
                return line[0]
        return Mark.EMPTY

    def render(self) -> str:
        separator = "\n-" + "+-" * (self._size - 1) + "\n"
        return separator.join("|".join(str(cell) for cell in row) for row in self._board)

    def __str__(self) -> str:
        return self.render()
