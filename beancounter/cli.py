"""Command-line driver: run one bean counter experiment in text mode.

Usage:
    beancounter slot_count bean_count <luck | skill> [debug]
    beancounter --config experiment.yaml
    beancounter 20 1000 skill debug --seed 7 -v
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import random
import sys
from typing import Callable, NoReturn, Optional, Sequence

from beancounter.core.bean import Bean
from beancounter.core.board import BoardEngine
from beancounter.core.exceptions import ConfigurationError
from beancounter.core.registry import list_available_modes
from beancounter.core.simulation_engine import SimulationEngine
from beancounter.utils.config_loader import ExperimentConfig, load_config
from beancounter.utils.consts import USAGE_EXAMPLES
from beancounter.utils.formatting import format_board, format_slots

logger = logging.getLogger(__name__)

DEBUG_KEYWORD = "debug"


class UsageParser(argparse.ArgumentParser):
    """Argument parser that prints usage with examples on bad input."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print(USAGE_EXAMPLES, file=sys.stderr)
        self.exit(2, f"{self.prog}: error: {message}\n")


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def build_parser() -> UsageParser:
    parser = UsageParser(
        prog="beancounter",
        description="Run a bean counter (Galton box) experiment in text mode.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=USAGE_EXAMPLES,
    )
    parser.add_argument(
        "slot_count", nargs="?", type=_positive_int, help="Number of slots"
    )
    parser.add_argument(
        "bean_count", nargs="?", type=_non_negative_int, help="Number of beans"
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=list_available_modes(),
        help="Movement mode of every bean",
    )
    parser.add_argument(
        "debug",
        nargs="?",
        choices=[DEBUG_KEYWORD],
        help="Print the board after every step",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the shared RNG")
    parser.add_argument(
        "--config",
        default=None,
        help="YAML experiment file; positional arguments override its values",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def resolve_config(args: argparse.Namespace) -> ExperimentConfig:
    """Merge the optional YAML file with the command-line values.

    Raises:
        ConfigurationError: if the file is invalid or required values are missing
    """
    given = {
        "slot_count": args.slot_count,
        "bean_count": args.bean_count,
        "mode": args.mode,
        "seed": args.seed,
    }
    given = {key: value for key, value in given.items() if value is not None}
    if args.debug == DEBUG_KEYWORD:
        given["debug"] = True

    if args.config is not None:
        return dataclasses.replace(load_config(args.config), **given)

    missing = [key for key in ("slot_count", "bean_count", "mode") if key not in given]
    if missing:
        raise ConfigurationError(", ".join(missing), "missing required argument")
    return ExperimentConfig(**given)


def run_experiment(
    config: ExperimentConfig, echo: Optional[Callable[[str], None]] = None
) -> BoardEngine:
    """Build the board and beans for ``config`` and run it to completion.

    Args:
        config: Experiment to run
        echo: Receives the rendered board after reset and every step when
            config.debug is set

    Returns:
        The finished board
    """
    rng = random.Random(config.seed)
    board = BoardEngine(config.slot_count)
    beans = [
        Bean.for_mode(config.mode, config.slot_count, rng)
        for _ in range(config.bean_count)
    ]

    engine = SimulationEngine()
    engine.reset(board, beans)

    observer = None
    if config.debug:
        show = echo or print
        show(format_board(board))
        observer = lambda b: show(format_board(b))  # noqa: E731

    steps = engine.run(board, observer=observer)
    logger.info(
        "Experiment finished: %d steps, average slot %.4f",
        steps,
        board.get_average_slot_bean_count(),
    )
    return board


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    board = run_experiment(config)

    print("Slot bean counts:")
    print(format_slots(board))
    return 0


if __name__ == "__main__":
    sys.exit(main())
