import logging
from collections.abc import Callable

from nxn_tic_tac_toe.board import FIRST_PLAYER, Cell, Line, PlayerSymbol, opponent
from nxn_tic_tac_toe.exception import AlreadyWonError, InvalidMoveError, OutOfTurnError
from nxn_tic_tac_toe.game import GameState, GameStatus
from nxn_tic_tac_toe.lines import generate_lines

logger = logging.getLogger(__name__)


class GameEngine:
    def __init__(self, board_size: int, min_run: int) -> None:
        self._board_updated_cbs: list[Callable[[], None]] = []
        self._turn_started_cbs: list[Callable[[PlayerSymbol], None]] = []
        self.initialize(board_size, min_run)

    def initialize(self, board_size: int, min_run: int) -> None:
        """Start a new game, discarding any previous one.

        Raises ConfigError if the board size or the minimum run is invalid, in which case
        the previous game (if any) is left untouched.
        """
        lines = generate_lines(board_size, min_run)
        self._board_size = board_size
        self._min_run = min_run
        self._lines = lines
        self._moves: dict[PlayerSymbol, list[Cell]] = {"X": [], "O": []}
        self._owners: dict[Cell, PlayerSymbol] = {}
        self._current_player: PlayerSymbol = FIRST_PLAYER
        self._winner: PlayerSymbol | None = None
        self._winning_line: Line | None = None
        logger.debug("Win map: %s", self._lines)
        logger.debug("Current player: %s", self._current_player)

    @property
    def board_size(self) -> int:
        return self._board_size

    @property
    def min_run(self) -> int:
        return self._min_run

    @property
    def lines(self) -> tuple[Line, ...]:
        return self._lines

    @property
    def current_player(self) -> PlayerSymbol:
        return self._current_player

    @property
    def winner(self) -> PlayerSymbol | None:
        return self._winner

    @property
    def winning_line(self) -> Line | None:
        return self._winning_line

    @property
    def status(self) -> GameStatus:
        return GameStatus.IN_PROGRESS if self._winner is None else GameStatus.FINISHED

    @property
    def board(self) -> list[list[PlayerSymbol | None]]:
        return [[self._owners.get((row, col)) for col in range(self._board_size)] for row in range(self._board_size)]

    @property
    def state(self) -> GameState:
        return GameState(
            moves={player: tuple(cells) for player, cells in self._moves.items()},
            current_player=self._current_player,
            winner=self._winner,
            winning_line=self._winning_line,
        )

    def moves(self, player: PlayerSymbol) -> tuple[Cell, ...]:
        return tuple(self._moves[player])

    def owner(self, cell: Cell) -> PlayerSymbol | None:
        return self._owners.get(cell)

    def is_full(self) -> bool:
        return len(self._owners) == self._board_size * self._board_size

    def is_draw(self) -> bool:
        return self.is_full() and self._winner is None

    def is_game_over(self) -> bool:
        return self._winner is not None or self.is_full()

    def add_board_updated_cb(self, callback: Callable[[], None]) -> None:
        self._board_updated_cbs.append(callback)

    def add_turn_started_cb(self, callback: Callable[[PlayerSymbol], None]) -> None:
        self._turn_started_cbs.append(callback)

    def start(self) -> None:
        """Let the hosts render the empty board and ask the first player for a move."""
        self._notify_board_updated()
        self._notify_turn_started()

    def apply_move(self, cell: Cell, player: PlayerSymbol) -> Line | None:
        """Claim ``cell`` for ``player`` and check whether the player has won.

        Returns the winning line if this move ended the game, None otherwise.
        The engine state is left unchanged when the move is rejected.

        Raises:
            AlreadyWonError: the game already has a winner.
            IndexError: the cell is outside the board.
            InvalidMoveError: the cell was already claimed.
            OutOfTurnError: it's not the player's turn.
        """
        row, col = cell
        if self._winner is not None:
            logger.debug("Rejected move %s by %s: game over", cell, player)
            raise AlreadyWonError("Game over.")

        if not (0 <= row < self._board_size) or not (0 <= col < self._board_size):
            raise IndexError("Move out of bounds.")

        if cell in self._owners:
            logger.debug("Rejected move %s by %s: cell occupied by %s", cell, player, self._owners[cell])
            raise InvalidMoveError("Cell occupied.")

        if player != self._current_player:
            logger.debug("Rejected move %s by %s: it's %s's turn", cell, player, self._current_player)
            raise OutOfTurnError("Not your turn.")

        self._owners[cell] = player
        self._moves[player].append(cell)

        winning_line = self._find_winning_line(player)
        if winning_line is not None:
            self._winner = player
            self._winning_line = winning_line
            logger.info("Player %s wins with %s", player, winning_line)
        else:
            self._current_player = opponent(player)
            logger.debug("Current player: %s", self._current_player)

        self._notify_board_updated()
        self._notify_turn_started()
        return winning_line

    def _find_winning_line(self, player: PlayerSymbol) -> Line | None:
        # Not enough marks to fill any line yet
        if len(self._moves[player]) < self._min_run:
            return None
        claimed = set(self._moves[player])
        for line in self._lines:
            if claimed.issuperset(line):
                return line
        return None

    def _notify_board_updated(self) -> None:
        for callback in list(self._board_updated_cbs):
            callback()

    def _notify_turn_started(self) -> None:
        if self.is_game_over():
            return
        for callback in list(self._turn_started_cbs):
            callback(self._current_player)
