"""Command-line entry point.

Maps flags onto a :class:`grid_runner.config.GameConfig`, configures logging
and runs one interactive game. Always exits with status 0 once a game has
started, whatever the outcome.
"""

import argparse
import logging
import random
import time
from typing import List, Optional

from grid_runner import config as defaults
from grid_runner.config import GameConfig
from grid_runner.game_loop import GameLoop

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-runner",
        description="Reach G, collect * for points, avoid E. Move with W/A/S/D.",
    )
    parser.add_argument(
        "--rows", type=int, default=defaults.DEFAULT_ROWS, help="Board rows"
    )
    parser.add_argument(
        "--cols", type=int, default=defaults.DEFAULT_COLS, help="Board columns"
    )
    parser.add_argument(
        "--stars",
        type=int,
        default=defaults.DEFAULT_NUM_STARS,
        help="Target number of stars",
    )
    parser.add_argument(
        "--enemies",
        type=int,
        default=defaults.DEFAULT_NUM_ENEMIES,
        help="Number of enemies",
    )
    parser.add_argument(
        "--respawn-interval",
        type=int,
        default=defaults.DEFAULT_RESPAWN_INTERVAL,
        help="Attempt a star respawn every N turns",
    )
    parser.add_argument(
        "--respawn-tries",
        type=int,
        default=defaults.DEFAULT_RESPAWN_MAX_TRIES,
        help="Sampling attempts per respawn",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="RNG seed (default: clock)"
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen between turns",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    seed = args.seed if args.seed is not None else time.time_ns()
    try:
        config = GameConfig(
            rows=args.rows,
            cols=args.cols,
            num_stars=args.stars,
            num_enemies=args.enemies,
            respawn_interval=args.respawn_interval,
            respawn_max_tries=args.respawn_tries,
            seed=seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logger.debug("Starting with %s", config)
    GameLoop(config, rng=random.Random(seed), clear=not args.no_clear).run()
    return 0
