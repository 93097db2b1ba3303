"""Command-line entry point."""
from __future__ import annotations

import argparse
import sys

from loguru import logger

from ball_arena import config as defaults
from ball_arena.arena import Arena
from ball_arena.config import ArenaConfig
from ball_arena.render import TextRenderer
from ball_arena.runner import run
from ball_arena.types import InvalidConfigError

EXIT_OK = 0
EXIT_INVALID_CONFIG = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Ball arena - text-mode collision simulation")
    p.add_argument("--width", type=int, default=defaults.WIDTH,
                   help=f"Arena width (default: {defaults.WIDTH})")
    p.add_argument("--height", type=int, default=defaults.HEIGHT,
                   help=f"Arena height (default: {defaults.HEIGHT})")
    p.add_argument("--regular", type=int, default=defaults.REGULAR_COUNT,
                   help=f"Regular balls (default: {defaults.REGULAR_COUNT})")
    p.add_argument("--monsters", type=int, default=defaults.MONSTER_COUNT,
                   help=f"Monster balls (default: {defaults.MONSTER_COUNT})")
    p.add_argument("--repellents", type=int, default=defaults.REPELLENT_COUNT,
                   help=f"Repellent balls (default: {defaults.REPELLENT_COUNT})")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--interval", type=float, default=defaults.TICK_INTERVAL,
                   help=f"Seconds between ticks (default: {defaults.TICK_INTERVAL})")
    p.add_argument("--max-ticks", type=int, default=None,
                   help="Stop after this many ticks even if regular balls remain")
    p.add_argument("--max-events", type=int, default=defaults.MAX_EVENTS,
                   help=f"Newest events kept in memory, 0 keeps all (default: {defaults.MAX_EVENTS})")
    p.add_argument("--no-clear", action="store_true",
                   help="Append each frame instead of clearing the terminal")
    p.add_argument("--log-level", default="WARNING",
                   choices=["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR"],
                   help="Log level for stderr (default: WARNING)")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> ArenaConfig:
    return ArenaConfig(
        width=args.width,
        height=args.height,
        regular_count=args.regular,
        monster_count=args.monsters,
        repellent_count=args.repellents,
        tick_interval=args.interval,
        seed=args.seed,
        max_ticks=args.max_ticks,
        max_events=args.max_events,
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    cfg = config_from_args(args)
    try:
        arena = Arena.from_config(cfg)
    except InvalidConfigError as e:
        logger.error("invalid configuration: {}", e)
        return EXIT_INVALID_CONFIG

    run(arena, TextRenderer(clear=not args.no_clear), max_ticks=cfg.max_ticks)
    return EXIT_OK
