# ruff: noqa: T201

from nxn_tic_tac_toe.board import PlayerSymbol
from nxn_tic_tac_toe.game_engine import GameEngine
from nxn_tic_tac_toe.ui import Ui


class TerminalUi(Ui):
    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._board_size = game_engine.board_size
        self._max_move = self._board_size * self._board_size
        self._cell_width = len(str(self._max_move)) + 2

    def run(self) -> None:
        super().run()
        while self._running:
            self._get_input()
        print("Terminal UI stopped", flush=True)

    def _stop(self) -> None:
        print("Press Enter to exit", end="", flush=True)
        super()._stop()

    def enable_input(self, player: PlayerSymbol) -> None:
        super().enable_input(player)
        if not self._running:
            return
        self._ask_for_move()

    def _ask_for_move(self) -> None:
        print(f"Player {self._current_player}'s move (1-{self._max_move}): ", end="", flush=True)

    def _get_input(self) -> None:
        try:
            input_str = input()
        except (KeyboardInterrupt, EOFError):
            super()._stop()
            return

        if input_str == "exit":
            super()._stop()

        if not self._input_enabled or not self._running:
            return

        try:
            board_position = int(input_str)
        except ValueError:
            self._on_input_error(ValueError("Not an integer"))
            self._ask_for_move()
            return

        if not (1 <= board_position <= self._max_move):
            self._on_input_error(ValueError(f"Not between 1 and {self._max_move}"))
            self._ask_for_move()
            return

        row, col = divmod(board_position - 1, self._board_size)
        self._apply_move(row, col)
        if not self._running:
            input()

    def _cell_text(self, row: int, col: int) -> str:
        value = self._game_engine.owner((row, col))
        if value is None:
            return str(row * self._board_size + col + 1).center(self._cell_width)
        if self._is_winning_cell((row, col)):
            return f"[{value}]".center(self._cell_width)
        return value.center(self._cell_width)

    def render(self) -> str:
        size = self._board_size
        rows = ["|".join(self._cell_text(row, col) for col in range(size)) for row in range(size)]
        separator = "\n" + "+".join("-" * self._cell_width for _ in range(size)) + "\n"
        return separator.join(rows)

    def _render_board(self) -> None:
        print(f"\n{self.render()}\n", flush=True)

    def _show_end_message(self, msg: str) -> None:
        print(f"{msg}", flush=True)
        self._stop()

    def _on_input_error(self, exception: Exception) -> None:
        if not self._running:
            return
        print(str(exception), flush=True)
