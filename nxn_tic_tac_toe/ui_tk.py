import threading
import tkinter as tk
from functools import partial
from tkinter import messagebox
from typing import Final

from nxn_tic_tac_toe.board import PlayerSymbol
from nxn_tic_tac_toe.game_engine import GameEngine
from nxn_tic_tac_toe.ui import Ui


class TkUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Tk)"
    WINNER_COLOR: Final = "#3f7f3f"

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._board_size = game_engine.board_size
        self._buttons: list[tk.Button] = []

    def run(self) -> None:
        self._root = tk.Tk()
        self._root.title(self.TITLE)
        self._root.protocol("WM_DELETE_WINDOW", self._stop)
        self._build_grid()
        super().run()
        self._root.mainloop()

    def _stop(self) -> None:
        self._root.after(0, self._root.quit)
        super()._stop()

    def enable_input(self, player: PlayerSymbol) -> None:
        super().enable_input(player)
        if not self._running:
            return
        self._root.title(f"{self.TITLE} - Player {player}")

    def _disable_input(self) -> None:
        super()._disable_input()
        self._root.title(self.TITLE)

    def _build_grid(self) -> None:
        font_size = max(8, 96 // self._board_size)
        for i in range(self._board_size * self._board_size):
            btn = tk.Button(
                self._root,
                text="",
                width=3,
                height=1,
                font=("Helvetica", font_size),
                command=partial(self._on_click, i),
            )
            row, col = divmod(i, self._board_size)
            btn.grid(row=row, column=col, padx=2, pady=2)
            self._buttons.append(btn)

    def _on_click(self, index: int) -> None:
        if not self._input_enabled or not self._running:
            return
        row, col = divmod(index, self._board_size)
        self._apply_move(row, col)

    def _render_board(self) -> None:
        for i, btn in enumerate(self._buttons):
            cell = divmod(i, self._board_size)
            value = self._game_engine.owner(cell)
            btn.config(text=value if value is not None else "")
            if self._is_winning_cell(cell):
                btn.config(bg=self.WINNER_COLOR)

    def _show_end_message(self, msg: str) -> None:
        threading.Thread(target=self._show_end_message_internal, daemon=True, args=(msg,)).start()

    def _show_end_message_internal(self, msg: str) -> None:
        messagebox.showinfo("Game Over", msg)
        self._stop()

    def _on_input_error(self, _exception: Exception) -> None:
        pass
