from abc import ABC, abstractmethod

from nxn_tic_tac_toe.board import Cell, PlayerSymbol
from nxn_tic_tac_toe.exception import InvalidMoveError, OutOfTurnError
from nxn_tic_tac_toe.game_engine import GameEngine


class Ui(ABC):
    def __init__(self, game_engine: GameEngine) -> None:
        self._game_engine = game_engine
        self._running = False
        self._input_enabled = False
        self._current_player: PlayerSymbol | None = None
        self._game_engine.add_board_updated_cb(self.on_board_updated)
        self._game_engine.add_turn_started_cb(self.enable_input)

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

    def _stop(self) -> None:
        self._running = False

    def _apply_move(self, row: int, col: int) -> None:
        # Disable own input immediately.
        # Prevents submitting the same click twice while the move is being applied.
        self._disable_input()
        try:
            self._game_engine.apply_move((row, col), self._game_engine.current_player)
        except (InvalidMoveError, OutOfTurnError) as e:
            self._on_input_error(e)
            if not self._game_engine.is_game_over():
                self.enable_input(self._game_engine.current_player)

    def enable_input(self, player: PlayerSymbol) -> None:
        if not self._running:
            return
        self._current_player = player
        self._input_enabled = True

    def _disable_input(self) -> None:
        self._input_enabled = False

    def _is_winning_cell(self, cell: Cell) -> bool:
        winning_line = self._game_engine.winning_line
        return winning_line is not None and cell in winning_line

    def on_board_updated(self) -> None:
        if not self._running:
            return
        # Every UI gets the update, including the ones that didn't make the move.
        # Input is re-enabled by the turn started callback if the game goes on.
        self._disable_input()
        self._render_board()
        winner = self._game_engine.winner
        if winner:
            self._show_end_message(f"Winner: {winner}")
        elif self._game_engine.is_draw():
            self._show_end_message("It's a draw")

    @abstractmethod
    def _render_board(self) -> None:
        pass

    @abstractmethod
    def _show_end_message(self, message: str) -> None:
        pass

    @abstractmethod
    def _on_input_error(self, exception: Exception) -> None:
        pass
