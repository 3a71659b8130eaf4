from typing import Final, Literal, TypeAlias

from direction_tic_tac_toe.coordinate import BOARD_SIZE, Coordinate
from direction_tic_tac_toe.exception import OccupiedError, OutOfRangeError

PlayerSymbol: TypeAlias = Literal["X", "O"]
Cell: TypeAlias = PlayerSymbol | None

CELL_COUNT: Final = BOARD_SIZE * BOARD_SIZE


def _line_mask(cells: list[Coordinate]) -> int:
    return sum(2**cell.index for cell in cells)


def _winning_lines() -> tuple[int, ...]:
    span = range(BOARD_SIZE)
    lines: list[list[Coordinate]] = []

    lines.extend([Coordinate(x, y) for x in span] for y in span)  # Horizontal lines
    lines.extend([Coordinate(x, y) for y in span] for x in span)  # Vertical lines
    lines.append([Coordinate(i, i) for i in span])  # First diagonal
    lines.append([Coordinate(BOARD_SIZE - 1 - i, i) for i in span])  # Second diagonal

    return tuple(_line_mask(line) for line in lines)


# (7, 56, 448, 73, 146, 292, 273, 84)
WINNING_LINES: Final = _winning_lines()


class Board:
    def __init__(self) -> None:
        self._cells: list[Cell] = [None] * CELL_COUNT

    @property
    def cells(self) -> tuple[Cell, ...]:
        return tuple(self._cells)

    def cell_at(self, index: int) -> Cell:
        return self._cells[index]

    def is_occupied(self, coord: Coordinate) -> bool:
        index = coord.index
        if not (0 <= index < CELL_COUNT):
            return False
        return self._cells[index] is not None

    def place(self, coord: Coordinate, symbol: PlayerSymbol) -> None:
        index = coord.index
        if not (0 <= index < CELL_COUNT):
            raise OutOfRangeError(index)

        if self._cells[index] is not None:
            raise OccupiedError(index)

        self._cells[index] = symbol

    def score(self, symbol: PlayerSymbol) -> int:
        """Bitmask of the cells marked with ``symbol``, bit ``i`` standing for cell ``i``."""
        return sum(2**index for index, cell in enumerate(self._cells) if cell == symbol)

    def has_won(self, symbol: PlayerSymbol) -> bool:
        score = self.score(symbol)
        return any(score & line == line for line in WINNING_LINES)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)
