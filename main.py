"""
main.py — Entry point.

Run with:
    python main.py

Arrow keys steer, X quits. Set TERMSNAKE_LOG=/path/to/file to keep a log;
stdout belongs to the game screen.

Requires:
    pip install rich
"""

import logging
import sys

from rich.console import Console

from termsnake.config import LOG_FILE, LOG_FORMAT
from termsnake.controller import GameController
from termsnake.terminal import is_interactive


def main() -> None:
    if LOG_FILE:
        logging.basicConfig(filename=LOG_FILE, level=logging.DEBUG, format=LOG_FORMAT)
    if not is_interactive(sys.stdin):
        # without a keyboard the snake would idle until killed
        Console(stderr=True).print(
            "[input] stdin is not a terminal; run termsnake from an interactive shell.",
            markup=False,
        )
        sys.exit(1)
    GameController().run()


if __name__ == "__main__":
    main()
