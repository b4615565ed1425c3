from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from loguru import logger

from santa_draw.cli.interactive import error, run
from santa_draw.core.config import Settings, load_settings
from santa_draw.core.logging import setup_logging
from santa_draw.services import AssignmentError, Group

DEMO_PEOPLE = ["Sheldon", "Amy", "Leonard", "Penny", "Rajesh"]
DEMO_PAIRS = [("Sheldon", "Amy"), ("Sheldon", "Leonard"), ("Leonard", "Penny")]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="santa-draw",
        description="Draw Secret Santa names with exclusion rules.",
    )
    parser.add_argument("--max-attempts", type=int, default=None, help="Attempts before giving up (default: 1000).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed, for reproducible draws.")
    parser.add_argument("--log-level", default=None, help="stderr log level (default: WARNING).")
    parser.add_argument("--log-path", default=None, help="Also write DEBUG logs to this file.")
    parser.add_argument("--demo", action="store_true", help="Draw for a built-in example group and print it.")
    return parser


def build_group(settings: Settings) -> Group:
    return Group(rng=random.Random(settings.seed), max_attempts=settings.max_attempts)


def run_demo(group: Group) -> int:
    for name in DEMO_PEOPLE:
        group.add(name)
    for a, b in DEMO_PAIRS:
        group.exclude_pair(a, b)

    try:
        assignments = group.assign()
    except AssignmentError as exc:
        print(error(f"Error: {exc}"))
        return 1

    for giver, receiver in assignments:
        print(f"{giver} => {receiver}")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = load_settings(
            log_level=args.log_level,
            log_path=args.log_path,
            max_attempts=args.max_attempts,
            seed=args.seed,
        )
        setup_logging(settings.log_level, settings.log_path)
        group = build_group(settings)
    except ValueError as exc:
        # logging may be half set up at this point
        print(error(f"Invalid configuration: {exc}"), file=sys.stderr)
        return 2

    logger.debug("Drawing with max_attempts={attempts}", attempts=group.max_attempts)

    if args.demo:
        return run_demo(group)

    try:
        return run(group)
    except KeyboardInterrupt:
        print()
        return 130


def entrypoint() -> None:
    sys.exit(main())
