"""CLI for inspecting and editing stored game preferences."""

from __future__ import annotations

import argparse
import logging
import sys

from grid_snake.config import GameSettings
from grid_snake.difficulty import DIFFICULTY_PROFILES, Difficulty
from grid_snake.storage import JsonFileStore, Preferences

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake preference tools.",
    )
    prefs_help = "Path to the preferences file (default: ~/.grid_snake/preferences.json)."
    parser.add_argument("--prefs", type=str, default=None, help=prefs_help)

    # Also accepted after the subcommand; SUPPRESS keeps a top-level value.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--prefs", type=str, default=argparse.SUPPRESS, help=prefs_help)

    sub = parser.add_subparsers(dest="command", help="Available commands.")

    sub.add_parser("show", parents=[common], help="Print the best score and difficulty.")
    sub.add_parser("reset-best", parents=[common], help="Reset the stored best score to 0.")
    sub.add_parser("difficulties", parents=[common], help="List difficulty presets.")

    diff_p = sub.add_parser(
        "difficulty", parents=[common], help="Select the default difficulty.",
    )
    diff_p.add_argument(
        "key", choices=[d.value for d in Difficulty],
        help="Difficulty key.",
    )

    return parser


def _preferences(args: argparse.Namespace) -> Preferences:
    path = args.prefs if args.prefs else GameSettings().prefs_path
    return Preferences(JsonFileStore(path))


def _run_show(args: argparse.Namespace) -> int:
    prefs = _preferences(args)
    print(f"best: {prefs.load_best()}")  # noqa: T201
    print(f"difficulty: {prefs.load_difficulty().value}")  # noqa: T201
    return 0


def _run_reset_best(args: argparse.Namespace) -> int:
    _preferences(args).save_best(0)
    logger.info("Best score reset.")
    return 0


def _run_difficulty(args: argparse.Namespace) -> int:
    difficulty = Difficulty(args.key)
    _preferences(args).save_difficulty(difficulty)
    logger.info("Default difficulty set to %s.", difficulty.value)
    return 0


def _run_difficulties(args: argparse.Namespace) -> int:
    for difficulty, p in DIFFICULTY_PROFILES.items():
        print(  # noqa: T201
            f"{difficulty.value:<8} start={p.initial_tick_ms}ms "
            f"every={p.speedup_food_interval} factor={p.speedup_factor} "
            f"floor={p.min_tick_ms}ms"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "show": _run_show,
        "reset-best": _run_reset_best,
        "difficulty": _run_difficulty,
        "difficulties": _run_difficulties,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
