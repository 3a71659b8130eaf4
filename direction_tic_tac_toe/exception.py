from enum import Enum


class GameError(Exception):
    pass


class LogicError(GameError):
    pass


class InvalidMoveError(GameError):
    def __init__(self, index: int, msg: str) -> None:
        super().__init__(msg)
        self.index = index


class OccupiedError(InvalidMoveError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"Cell {index} is occupied.")


class OutOfRangeError(InvalidMoveError):
    def __init__(self, index: int) -> None:
        super().__init__(index, f"No cell at index {index}.")


class InvalidNameError(GameError):
    def __init__(self, length: int, msg: str) -> None:
        super().__init__(msg)
        self.length = length


class NameTooShortError(InvalidNameError):
    def __init__(self, length: int, min_length: int) -> None:
        super().__init__(length, f"Name too short ({length} < {min_length}).")


class NameTooLongError(InvalidNameError):
    def __init__(self, length: int, max_length: int) -> None:
        super().__init__(length, f"Name too long ({length} > {max_length}).")


class DirectionErrorKind(Enum):
    TOO_MANY_PARTS = "too many parts"
    UNKNOWN_DIRECTION = "unknown direction"
    UNKNOWN_ROW = "unknown row"
    UNKNOWN_COLUMN = "unknown column"


class DirectionError(GameError):
    def __init__(self, kind: DirectionErrorKind, text: str) -> None:
        super().__init__(f"Invalid direction {text!r}: {kind.value}")
        self.kind = kind
