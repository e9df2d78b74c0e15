from enum import Enum


class Mark(Enum):
    FIRST = "X"
    SECOND = "O"
    EMPTY = " "

    def __str__(self) -> str:
        return self.value

    def opposite(self) -> "Mark":
        match self:
            case Mark.FIRST:
                return Mark.SECOND
            case Mark.SECOND:
                return Mark.FIRST
            case _:
                return Mark.EMPTY
