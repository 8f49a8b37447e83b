"""Headless Schotter driver: advance the animation and report where it ended up."""
from __future__ import annotations

import argparse
import logging
import sys

import numpy as np

from .core.animator import new_animator
from .core.config import AnimatorConfig, fresh_seed
from .core.errors import ConfigError
from .core.grid import COLS, ROWS, configure
from .core.scatter import ScatterAnimator
from .logging_config import setup_logging

logger = logging.getLogger("schotter")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schotter",
        description="Run the Schotter stone animation without a window.",
    )
    parser.add_argument("--rows", type=int, default=ROWS)
    parser.add_argument("--cols", type=int, default=COLS)
    parser.add_argument("--ticks", type=int, default=300)
    parser.add_argument("--seed", type=int, default=None, help="random seed (fresh one if omitted)")
    parser.add_argument("--displacement", type=float, default=1.0)
    parser.add_argument("--rotation", type=float, default=1.0)
    parser.add_argument("--motion", type=float, default=0.5)
    parser.add_argument("--tier", type=int, choices=(1, 2, 3), default=3)
    parser.add_argument("--show", action="store_true", help="open the final frame in an image viewer")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    seed = fresh_seed() if args.seed is None else args.seed
    try:
        layout = configure(args.rows, args.cols)
        config = AnimatorConfig(
            displacement_gain=args.displacement,
            rotation_gain=args.rotation,
            motion_probability=args.motion,
            random_seed=seed,
        )
        if args.tier == 3:
            animator = new_animator(layout, config)
        else:
            # tiers 1 and 2 share numerics; only ownership of the result differs
            animator = ScatterAnimator(layout, config)
    except ConfigError as e:
        logger.error("%s", e)
        return 2

    logger.info("%dx%d grid, seed %d, tier %d", layout.rows, layout.cols, seed, args.tier)
    for tick in range(1, max(1, args.ticks) + 1):
        animator.advance(tick)

    snap = animator.snapshot()
    logger.info(
        "after %d ticks: max |offset| %.3f, max |rotation| %.3f rad",
        max(1, args.ticks),
        float(np.max(np.abs(snap[:, 2:4]))) if len(snap) else 0.0,
        float(np.max(np.abs(snap[:, 4]))) if len(snap) else 0.0,
    )
    if args.tier == 3:
        moving, resting = animator.counts()
        logger.info("%d stones moving, %d resting", moving, resting)

    if args.show:
        from .utils.render import draw_stones

        draw_stones(snap, layout.cols, layout.rows).show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
