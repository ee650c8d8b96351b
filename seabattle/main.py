"""Application entry point."""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys
from collections.abc import Sequence

from seabattle.game.app.loop import run_game
from seabattle.game.app.simulate import run_simulation
from seabattle.game.core.errors import InputClosedError
from seabattle.game.infra.app_data import ensure_app_data_dirs
from seabattle.game.infra.config import AppConfig, load_app_config, load_default_env_files
from seabattle.game.infra.logging import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seabattle", description="Two-player terminal battleship.")
    parser.add_argument(
        "--no-show-ai",
        action="store_true",
        help="hide AI fleets when printing their boards during gameplay",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for AI fleets and shots")
    parser.add_argument(
        "--difficulty",
        choices=("easy", "normal"),
        default=None,
        help="AI shot selection strategy",
    )
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    parser.add_argument(
        "--simulate",
        type=int,
        metavar="GAMES",
        default=0,
        help="play GAMES automated AI-vs-AI matches and report statistics",
    )
    return parser


def resolve_config(args: argparse.Namespace, base: AppConfig) -> AppConfig:
    """Apply command-line overrides on top of environment configuration."""
    overrides: dict[str, object] = {}
    if args.no_show_ai:
        overrides["show_ai_board"] = False
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.difficulty is not None:
        overrides["ai_difficulty"] = args.difficulty
    if args.log_level is not None:
        overrides["log_level"] = args.log_level.upper()
    return dataclasses.replace(base, **overrides)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    config = resolve_config(args, load_app_config())
    paths = ensure_app_data_dirs()
    setup_logging(level_name=config.log_level, console_format=config.log_format)
    logger.debug("app_data_paths root=%s logs=%s", paths["root"], paths["logs"])

    try:
        if args.simulate > 0:
            rng = random.Random(config.seed)
            summary = run_simulation(
                args.simulate, rng, difficulties=(config.ai_difficulty, config.ai_difficulty)
            )
            print(
                f"games={summary.games} wins={summary.wins} "
                f"rounds mean={summary.mean_rounds:.2f} min={summary.min_rounds} max={summary.max_rounds}"
            )
            return 0
        run_game(sys.stdin, sys.stdout, config)
    except (InputClosedError, OSError) as exc:
        logger.exception("game_aborted")
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
