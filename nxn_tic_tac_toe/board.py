from dataclasses import dataclass
from typing import Final, Literal

type PlayerSymbol = Literal["X", "O"]
type Cell = tuple[int, int]
type Line = tuple[Cell, ...]

FIRST_PLAYER: Final[PlayerSymbol] = "X"


@dataclass(frozen=True, slots=True)
class Move:
    player: PlayerSymbol
    row: int
    col: int

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


def opponent(player: PlayerSymbol) -> PlayerSymbol:
    return "O" if player == "X" else "X"
