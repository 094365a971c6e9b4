from typing import Final

import pygame

from nxn_tic_tac_toe.board import PlayerSymbol
from nxn_tic_tac_toe.game_engine import GameEngine
from nxn_tic_tac_toe.ui import Ui


class PygameUi(Ui):
    TITLE: Final = "Tic-Tac-Toe (Pygame)"
    WINDOW_SIZE: Final = 480
    LINE_WIDTH: Final = 2

    BG_COLOR: Final = (0, 0, 0)
    LINE_COLOR: Final = (127, 127, 127)
    WINNER_COLOR: Final = (63, 127, 63)
    X_COLOR: Final = (191, 63, 63)
    O_COLOR: Final = (63, 63, 191)
    TEXT_COLOR: Final = (255, 255, 255)

    def __init__(self, game_engine: GameEngine) -> None:
        super().__init__(game_engine)
        self._board_size = game_engine.board_size
        self._cell_size = self.WINDOW_SIZE // self._board_size
        self._board = self._game_engine.board
        self._title = self.TITLE
        self._end_message = ""

    def run(self) -> None:
        pygame.init()
        self._screen = pygame.display.set_mode((self.WINDOW_SIZE, self.WINDOW_SIZE))
        pygame.display.set_caption(self.TITLE)

        self._font = pygame.font.SysFont(None, max(self._cell_size, 16))
        self._small_font = pygame.font.SysFont(None, 48)
        self._click_font = pygame.font.SysFont(None, 24)

        super().run()
        self._main_loop()

    def enable_input(self, player: PlayerSymbol) -> None:
        super().enable_input(player)
        if not self._running:
            return
        self._title = f"{self.TITLE} - Player {player}"

    def _disable_input(self) -> None:
        super()._disable_input()
        self._title = self.TITLE

    def _main_loop(self) -> None:
        clock = pygame.time.Clock()
        while self._running:
            clock.tick(30)
            self._handle_events()
            self._render()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            match event.type:
                case pygame.QUIT:
                    self._stop()
                case pygame.MOUSEBUTTONDOWN:
                    if self._end_message:
                        pygame.event.post(pygame.event.Event(pygame.QUIT))
                    elif self._input_enabled:
                        self._on_click(event.pos)

    def _render(self) -> None:
        pygame.display.set_caption(self._title)
        self._screen.fill(self.BG_COLOR)
        self._draw_winning_line()
        self._draw_grid()
        self._draw_marks()
        self._draw_end_message()
        pygame.display.flip()

    def _on_click(self, pos: tuple[int, int]) -> None:
        x, y = pos
        col = x // self._cell_size
        row = y // self._cell_size
        if not (0 <= row < self._board_size) or not (0 <= col < self._board_size):
            return
        self._apply_move(row, col)

    def _render_board(self) -> None:
        self._board = self._game_engine.board

    def _show_end_message(self, msg: str) -> None:
        self._end_message = msg

    def _on_input_error(self, _exception: Exception) -> None:
        pass

    def _cell_rect(self, row: int, col: int) -> pygame.Rect:
        return pygame.Rect(col * self._cell_size, row * self._cell_size, self._cell_size, self._cell_size)

    def _draw_winning_line(self) -> None:
        for row, col in self._game_engine.winning_line or ():
            pygame.draw.rect(self._screen, self.WINNER_COLOR, self._cell_rect(row, col))

    def _draw_grid(self) -> None:
        grid_size = self._cell_size * self._board_size
        for i in range(1, self._board_size):
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (0, i * self._cell_size),
                (grid_size, i * self._cell_size),
                self.LINE_WIDTH,
            )
            pygame.draw.line(
                self._screen,
                self.LINE_COLOR,
                (i * self._cell_size, 0),
                (i * self._cell_size, grid_size),
                self.LINE_WIDTH,
            )

    def _draw_marks(self) -> None:
        for row in range(len(self._board)):
            for col in range(len(self._board[0])):
                value = self._board[row][col]
                if value is None:
                    continue
                text = self._font.render(value, True, self.X_COLOR if value == "X" else self.O_COLOR)  # noqa: FBT003
                rect = text.get_rect(center=self._cell_rect(row, col).center)
                self._screen.blit(text, rect)

    def _draw_end_message(self) -> None:
        if not self._end_message:
            return
        main_text = self._small_font.render(self._end_message, True, self.TEXT_COLOR)  # noqa: FBT003
        click_text = self._click_font.render("Click anywhere to exit", True, self.TEXT_COLOR)  # noqa: FBT003
        main_rect = main_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 - 20))
        click_rect = click_text.get_rect(center=(self.WINDOW_SIZE // 2, self.WINDOW_SIZE // 2 + 20))
        self._screen.blit(main_text, main_rect)
        self._screen.blit(click_text, click_rect)
