import argparse
import logging
import threading
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from nxn_tic_tac_toe.exception import ConfigError
from nxn_tic_tac_toe.game_engine import GameEngine
from nxn_tic_tac_toe.ui_terminal import TerminalUi

if TYPE_CHECKING:
    from nxn_tic_tac_toe.ui import Ui

DEFAULT_BOARD_SIZE = 7
DEFAULT_MIN_RUN = 4


def main() -> None:
    ui_choices = ("terminal", "pygame", "tk")

    parser, args = _parse_args(ui_choices)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Build game components

    try:
        game_engine = GameEngine(args.size, args.min_run)
    except ConfigError as e:
        parser.error(str(e))

    uis: list[Ui] = [_create_ui(ui, game_engine) for ui in args.ui]

    # -----------------------------
    # UI
    # -----------------------------
    ui_threads = [threading.Thread(target=ui.run, daemon=True) for ui in uis]

    for ui_thread in ui_threads:
        ui_thread.start()

    while not all(ui.running for ui in uis):
        time.sleep(0.1)

    game_engine.start()

    for ui_thread in ui_threads:
        ui_thread.join()


def _create_ui(name: str, game_engine: GameEngine) -> "Ui":
    # Graphical toolkits are only imported when requested
    match name:
        case "pygame":
            from nxn_tic_tac_toe.ui_pygame import PygameUi  # noqa: PLC0415

            return PygameUi(game_engine)
        case "tk":
            from nxn_tic_tac_toe.ui_tk import TkUi  # noqa: PLC0415

            return TkUi(game_engine)
        case _:
            return TerminalUi(game_engine)


def _parse_args(ui_choices: Iterable[str]) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="nxn_tic_tac_toe")

    parser.add_argument("--size", type=int, default=DEFAULT_BOARD_SIZE, help="board size (N for an NxN board)")
    parser.add_argument("--min-run", type=int, default=DEFAULT_MIN_RUN, help="cells in a line needed to win")

    parser.add_argument("--ui", nargs="+", choices=ui_choices, required=True)
    parser.add_argument("--debug", action="store_true", help="log the win map and every move")

    args = parser.parse_args()
    return parser, args


if __name__ == "__main__":
    main()
