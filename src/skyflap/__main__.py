"""
Command-line entry point: python -m skyflap
"""

import argparse
import logging

from .client import FlappyClient
from .constants import DB_FILE, RENDER_FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .score_db import ScoreStore


def setup_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="skyflap", description="Flap between the pipes.")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--db", default=DB_FILE, help="SQLite file holding the best score")
    parser.add_argument("--seed", type=int, default=None, help="Seed for pipe placement")
    parser.add_argument("--fps", type=int, default=RENDER_FPS)
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logging(args.debug)

    store = ScoreStore(args.db)
    try:
        FlappyClient(store, size=(args.width, args.height), fps=args.fps, seed=args.seed).run()
    finally:
        store.close()


if __name__ == "__main__":
    main()
