class GameError(Exception):
    pass


class InvalidMoveError(GameError):
    pass
