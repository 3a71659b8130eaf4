from abc import ABC, abstractmethod

from direction_tic_tac_toe.board import Board, Cell


class BoardDisplay(ABC):
    @abstractmethod
    def display(self, board: Board) -> None:
        pass

    def close(self) -> None:  # noqa: B027
        """Release resources held by the display. Nothing to do by default."""


class LineWriter(ABC):
    @abstractmethod
    def writeln(self, text: str) -> None:
        pass


class LineReader(ABC):
    @abstractmethod
    def readln(self) -> str:
        """Block until the operator enters a line. Raises EOFError when input is exhausted."""


class CellFormatter(ABC):
    @abstractmethod
    def format(self, cell: Cell) -> str:
        pass


class BracketCellFormatter(CellFormatter):
    def format(self, cell: Cell) -> str:
        return f"[{cell if cell is not None else ' '}]"
