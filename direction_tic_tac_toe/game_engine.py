import logging
import random
from dataclasses import dataclass
from typing import Final, Protocol, Self, TypeAlias

from direction_tic_tac_toe.board import Board, PlayerSymbol
from direction_tic_tac_toe.coordinate import BOARD_SIZE, Coordinate, parse_coordinate
from direction_tic_tac_toe.exception import DirectionError, GameError, LogicError
from direction_tic_tac_toe.player import ComputerPlayer, HumanPlayer, Name, Player, Side
from direction_tic_tac_toe.ui import BoardDisplay, LineReader, LineWriter

log = logging.getLogger(__name__)

DRAW_MESSAGE: Final = "We've reached a draw."
FIELD_TAKEN_MESSAGE: Final = "That field is already taken. Please choose another."
INVALID_INPUT_MESSAGE: Final = "That is not a valid input..."
PROMPT_TEMPLATE: Final = (
    "{name} it's your turn. Where do you want to place your mark? "
    "Your input should be the column direction (top, center, bottom) and the row direction "
    '(left, center, right) separated by a minus, e.g. "top-left" or "center"'
)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True, slots=True)
class InProgress:
    pass


@dataclass(frozen=True, slots=True)
class Draw:
    pass


@dataclass(frozen=True, slots=True)
class Won:
    symbol: PlayerSymbol


GameState: TypeAlias = InProgress | Draw | Won


class GameEngine:
    """Alternating-turn loop between X and O until one side wins or the board is full.

    X always moves first. A win is checked right after each placement and fullness
    before each turn, so a last move that completes a line is reported as a win.
    """

    def __init__(
        self,
        x: Side,
        o: Side,
        display: BoardDisplay,
        reader: LineReader,
        writer: LineWriter,
        rng: RandomSource | None = None,
    ) -> None:
        if x.symbol != "X" or o.symbol != "O":
            msg = f"Sides must be bound to X and O, got {x.symbol} and {o.symbol}."
            raise LogicError(msg)

        self._board = Board()
        self._x = x
        self._o = o
        self._display = display
        self._reader = reader
        self._writer = writer
        self._rng: RandomSource = rng or random.Random()  # noqa: S311
        self._state: GameState = InProgress()

    @classmethod
    def single_player(
        cls,
        name: Name,
        display: BoardDisplay,
        reader: LineReader,
        writer: LineWriter,
        rng: RandomSource | None = None,
    ) -> Self:
        return cls(Side("X", HumanPlayer(name)), Side("O", ComputerPlayer()), display, reader, writer, rng)

    @classmethod
    def multi_player(
        cls,
        x: Side,
        o: Side,
        display: BoardDisplay,
        reader: LineReader,
        writer: LineWriter,
        rng: RandomSource | None = None,
    ) -> Self:
        return cls(x, o, display, reader, writer, rng)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def state(self) -> GameState:
        return self._state

    def play(self) -> GameState:
        if not isinstance(self._state, InProgress):
            raise LogicError("Game over.")

        while True:
            self._display.display(self._board)

            if self._board.is_full():
                self._writer.writeln(DRAW_MESSAGE)
                self._state = Draw()
                log.debug("Game ended in a draw")
                return self._state

            for side in (self._x, self._o):
                # X fills the ninth cell, O has nothing left to choose from.
                if self._board.is_full():
                    break
                if self._take_turn(side):
                    self._display.display(self._board)
                    self._writer.writeln(f"{side.symbol} has WON")
                    self._state = Won(side.symbol)
                    log.debug("Game won by %s", side.label)
                    return self._state

    def _take_turn(self, side: Side) -> bool:
        """Place one mark for ``side`` and report whether it completed a line."""
        coord = self._get_position(side.player)
        try:
            self._board.place(coord, side.symbol)
        except GameError as e:
            msg = f"Could not mark field {coord.index} with {side.symbol}"
            raise LogicError(msg) from e

        log.debug("%s marked cell %d", side.label, coord.index)
        return self._board.has_won(side.symbol)

    def _get_position(self, player: Player) -> Coordinate:
        while True:
            match player:
                case HumanPlayer(name=name):
                    coord = self._ask_for_direction(name)
                case ComputerPlayer():
                    coord = self._get_random_position()

            if not self._board.is_occupied(coord):
                return coord

            log.debug("Cell %d is taken, asking again", coord.index)
            self._writer.writeln(FIELD_TAKEN_MESSAGE)

    def _ask_for_direction(self, name: Name) -> Coordinate:
        while True:
            self._writer.writeln(PROMPT_TEMPLATE.format(name=name))

            text = self._reader.readln()
            try:
                return parse_coordinate(text)
            except DirectionError as e:
                log.debug("Rejected input: %s", e)

            self._writer.writeln(INVALID_INPUT_MESSAGE)

    def _get_random_position(self) -> Coordinate:
        return Coordinate(
            x=self._rng.randint(0, BOARD_SIZE - 1),
            y=self._rng.randint(0, BOARD_SIZE - 1),
        )
