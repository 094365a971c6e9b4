from dataclasses import dataclass
from enum import Enum

from nxn_tic_tac_toe.board import Cell, Line, PlayerSymbol


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True, slots=True)
class GameState:
    """Snapshot of a game: claimed cells per player, in the order they were claimed."""

    moves: dict[PlayerSymbol, tuple[Cell, ...]]
    current_player: PlayerSymbol
    winner: PlayerSymbol | None = None
    winning_line: Line | None = None

    @property
    def status(self) -> GameStatus:
        return GameStatus.IN_PROGRESS if self.winner is None else GameStatus.FINISHED

    @property
    def move_count(self) -> int:
        return sum(len(cells) for cells in self.moves.values())
