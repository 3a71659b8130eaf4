"""Translation of directional phrases such as "top-left" into grid coordinates."""

import contextlib
from dataclasses import dataclass
from enum import Enum
from typing import Final, Self

from direction_tic_tac_toe.exception import DirectionError, DirectionErrorKind

BOARD_SIZE: Final = 3
SEPARATOR: Final = "-"
CENTER: Final = "center"


@dataclass(frozen=True, slots=True)
class Coordinate:
    x: int
    y: int

    @property
    def index(self) -> int:
        return self.y * BOARD_SIZE + self.x

    @classmethod
    def from_index(cls, index: int) -> Self:
        y, x = divmod(index, BOARD_SIZE)
        return cls(x, y)


class Row(Enum):
    """Horizontal direction. Selects the x axis value."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, token: str) -> "Row":
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise DirectionError(DirectionErrorKind.UNKNOWN_ROW, token) from None

    @property
    def axis_value(self) -> int:
        return _ROW_AXIS[self]


class Column(Enum):
    """Vertical direction. Selects the y axis value."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"

    @classmethod
    def parse(cls, token: str) -> "Column":
        try:
            return cls(token.strip().lower())
        except ValueError:
            raise DirectionError(DirectionErrorKind.UNKNOWN_COLUMN, token) from None

    @property
    def axis_value(self) -> int:
        return _COLUMN_AXIS[self]


_ROW_AXIS: Final = {Row.LEFT: 0, Row.CENTER: 1, Row.RIGHT: 2}
_COLUMN_AXIS: Final = {Column.TOP: 0, Column.CENTER: 1, Column.BOTTOM: 2}


def parse_direction(text: str) -> tuple[Row, Column]:
    """Split a direction phrase into its row and column parts.

    Both word orders are accepted. The first token is tried as the row and the
    second as the column; when that fails, the tokens are swapped and the errors
    of the second attempt are reported.
    """
    normalized = text.strip().lower()

    if SEPARATOR not in normalized:
        if normalized == CENTER:
            return Row.CENTER, Column.CENTER
        raise DirectionError(DirectionErrorKind.UNKNOWN_DIRECTION, text)

    parts = normalized.split(SEPARATOR)
    if len(parts) != 2:  # noqa: PLR2004
        raise DirectionError(DirectionErrorKind.TOO_MANY_PARTS, text)
    first, second = parts

    # e.g. "left-top"
    with contextlib.suppress(DirectionError):
        return Row.parse(first), Column.parse(second)

    # e.g. "top-left"
    column = Column.parse(first)
    row = Row.parse(second)
    return row, column


def parse_coordinate(text: str) -> Coordinate:
    row, column = parse_direction(text)
    return Coordinate(x=row.axis_value, y=column.axis_value)
