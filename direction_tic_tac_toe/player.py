from dataclasses import dataclass
from typing import Final, TypeAlias

from direction_tic_tac_toe.board import PlayerSymbol
from direction_tic_tac_toe.exception import NameTooLongError, NameTooShortError

MIN_NAME_LEN: Final = 3
MAX_NAME_LEN: Final = 60


@dataclass(frozen=True, slots=True)
class Name:
    """Display name of a human player, stored trimmed."""

    value: str

    def __post_init__(self) -> None:
        value = self.value.strip()
        length = len(value)
        if length < MIN_NAME_LEN:
            raise NameTooShortError(length, MIN_NAME_LEN)
        if length > MAX_NAME_LEN:
            raise NameTooLongError(length, MAX_NAME_LEN)
        object.__setattr__(self, "value", value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class HumanPlayer:
    name: Name


@dataclass(frozen=True, slots=True)
class ComputerPlayer:
    pass


Player: TypeAlias = HumanPlayer | ComputerPlayer


@dataclass(frozen=True, slots=True)
class Side:
    symbol: PlayerSymbol
    player: Player

    @property
    def label(self) -> str:
        match self.player:
            case HumanPlayer(name=name):
                return f"{name} ({self.symbol})"
            case ComputerPlayer():
                return f"Computer ({self.symbol})"
