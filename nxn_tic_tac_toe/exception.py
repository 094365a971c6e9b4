class GameError(Exception):
    pass


class ConfigError(GameError):
    pass


class InvalidMoveError(GameError):
    pass


class AlreadyWonError(InvalidMoveError):
    pass


class OutOfTurnError(GameError):
    pass
