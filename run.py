"""
GridPick — run.py
Demo caller: place pieces on a board, then print the selected cells.
"""

import argparse
import logging
import sys
from pathlib import Path

# Ensure we can import the gridpick packages
project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from board.config import build_config, load_config
from board.logging_config import setup_logging
from ui.controller import GridInputController


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Place pieces on a board.")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with a [board] table.")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...).")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO), args.log_file)

    selected_cells = []

    def toggle(x: int, y: int, value: str) -> str:
        if value == "0":
            selected_cells.append((x, y))
            return "1"
        selected_cells.remove((x, y))
        return "0"

    if args.config is not None:
        config = load_config(args.config, initial_value="0", callback=toggle)
    else:
        config = build_config(width=100, height=30, initial_value="0", callback=toggle)

    board = GridInputController(config)
    board.start("Please place your pieces").wait()

    print("Finish\n", selected_cells)


if __name__ == "__main__":
    main()
