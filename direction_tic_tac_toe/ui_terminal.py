# ruff: noqa: T201

import sys
from typing import TextIO

from direction_tic_tac_toe.board import Board
from direction_tic_tac_toe.coordinate import BOARD_SIZE
from direction_tic_tac_toe.ui import BoardDisplay, BracketCellFormatter, CellFormatter, LineReader, LineWriter


class TerminalBoardDisplay(BoardDisplay):
    def __init__(self, formatter: CellFormatter | None = None, stream: TextIO | None = None) -> None:
        self._formatter = formatter or BracketCellFormatter()
        self._stream = stream

    def display(self, board: Board) -> None:
        out = self._stream or sys.stdout
        for index, cell in enumerate(board.cells):
            print(self._formatter.format(cell), end="", file=out)
            if (index + 1) % BOARD_SIZE == 0:
                print(file=out)
        out.flush()


class TerminalWriter(LineWriter):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def writeln(self, text: str) -> None:
        print(text, file=self._stream or sys.stdout, flush=True)


class TerminalReader(LineReader):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def readln(self) -> str:
        if self._stream is None:
            return input()

        line = self._stream.readline()
        if not line:
            raise EOFError("No more input.")
        return line.rstrip("\n")
