"""Command-line entry point for the parking assistance simulator.

``parkassist``, ``python -m parkassist`` and the repository's ``main.py`` all
flow through :func:`main` here. The program is interactive: it asks for a
mode and then either reads distances from the keyboard or generates them.
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

import yaml

from .config import ParkAssistConfig, load_config
from .core.clock import Clock, SystemClock, wall_clock_seed
from .core.console import InputTokens
from .core.models import SessionMode
from .core.session import ParkingSession
from .dataio.log_loader import summarize_log
from .dataio.reading_log import ReadingLogger
from .sensors.simulated import DistanceSimulator, SimulationSettings

logger = logging.getLogger(__name__)

BANNER = (
    "\n========================================\n"
    "   ||  PARKING ASSISTANCE SIMULATOR  ||\n"
    "   ||           (Python)             ||\n"
    "========================================\n"
)

MODE_MENU = "Choose mode:\n 1) Manual input\n 2) Automatic simulation"
MODE_PROMPT = "Enter choice (1 or 2): "


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parking distance sensor simulator")
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional YAML file with log and simulation settings",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Override the CSV file readings are appended to",
    )
    parser.add_argument(
        "--max-readings",
        type=int,
        default=None,
        help="Stop automatic mode after this many readings (default: run until Ctrl+C)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log informational messages to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def read_mode(tokens: InputTokens, out: TextIO) -> Optional[int]:
    """
    Prompt for the mode number; ``None`` when the answer is not an integer.

    Blank lines are skipped. Anything after the number on the same line is
    left in ``tokens`` for the manual-mode prompts.
    """
    print(MODE_PROMPT, end="", file=out, flush=True)
    token = tokens.next_token()
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _log_summary(path: Path) -> None:
    if not path.exists():
        return
    try:
        summary = summarize_log(path)
    except (OSError, ValueError, csv.Error) as exc:
        # Summary problems never change the exit status.
        logger.warning("Could not summarize log file %s (%s)", path, exc)
        return
    if summary.count == 0:
        logger.info("Log %s holds no readings yet", path)
        return
    logger.info(
        "Log %s holds %d readings (min %.2f cm, max %.2f cm, mean %.2f cm)",
        path,
        summary.count,
        summary.min_cm,
        summary.max_cm,
        summary.mean_cm,
    )
    for status, count in summary.status_counts.items():
        logger.info("  %-7s %d", status.value, count)


def run(
    config: ParkAssistConfig,
    *,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
    clock: Clock | None = None,
    max_readings: Optional[int] = None,
) -> int:
    """Run one interactive session and return the process exit status."""
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    err = err or sys.stderr
    clock = clock or SystemClock()

    log_path = config.log_path
    reading_log = ReadingLogger(log_path)
    reading_log.ensure_store()

    print(BANNER, file=out)
    print(MODE_MENU, file=out)
    tokens = InputTokens(stdin)
    choice = read_mode(tokens, out)
    if choice is None:
        print("Invalid input. Exiting.", file=err)
        return 1
    try:
        mode = SessionMode.from_choice(choice)
    except ValueError:
        print("Invalid choice. Exiting.", file=out)
        return 1

    session = ParkingSession(reading_log, clock=clock, out=out)
    if mode is SessionMode.MANUAL:
        print("Manual mode selected. Enter distance in cm (negative to exit).", file=out)
        session.run_manual(tokens)
    else:
        print("Automatic simulation mode. Press Ctrl+C to stop.", file=out, flush=True)
        seed = wall_clock_seed(clock)
        logger.info("Seeding simulator with %d", seed)
        simulator = DistanceSimulator.from_seed(seed, SimulationSettings.from_config(config))
        try:
            session.run_automatic(simulator, config.interval_s, max_readings)
        except KeyboardInterrupt:
            print("\nStopping simulation.", file=out)

    logger.info("Session processed %d readings", session.readings_processed)
    print(f"Simulation ended. Log file: {log_path}", file=out)
    _log_summary(log_path)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = load_config(args.config)
    except (ValueError, yaml.YAMLError) as exc:
        parser.error(f"Could not load config {args.config}: {exc}")
    if args.log_file:
        config.log_file = args.log_file

    return run(config, max_readings=args.max_readings)


if __name__ == "__main__":
    raise SystemExit(main())
