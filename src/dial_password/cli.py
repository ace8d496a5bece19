"""Command line entry point: ``dial-password [input_file] --part {1,2}``."""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn, Sequence

from loguru import logger

from .config import ConfigError, load_config
from .logging_setup import configure_logging
from .solver import CountingMode, iter_rotations, solve_puzzle

PARTS = {1: CountingMode.END_OF_ROTATION, 2: CountingMode.EVERY_STEP}


def handle_file_error(e: OSError | UnicodeDecodeError, filename: str) -> NoReturn:
    """Report an unreadable input file on stderr and exit with status 1."""
    if isinstance(e, FileNotFoundError):
        print(f"Error: File '{filename}' not found", file=sys.stderr)
        print("Make sure you're running from the correct directory", file=sys.stderr)
    elif isinstance(e, PermissionError):
        print(f"Error: Permission denied reading '{filename}'", file=sys.stderr)
        print("Check file permissions", file=sys.stderr)
    else:
        print(f"Error reading file: {e}", file=sys.stderr)
    sys.exit(1)


def read_input_file(filename: str) -> str:
    try:
        with open(filename, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        handle_file_error(e, filename)


def print_stats(input_text: str) -> None:
    rotations = [r.signed for r in iter_rotations(input_text)]
    print(f"Info - number of rotations: {len(rotations)}")
    if rotations:
        print(f"Info - max rotations: {max(rotations)}; min rotations: {min(rotations)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dial-password",
        description="Count how often the safe dial points at 0",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Rotation input file (default: run.input_file from config)",
    )
    parser.add_argument(
        "--part", "-p",
        type=int,
        choices=sorted(PARTS),
        help="1: count zeros at the end of each rotation; 2: count every click",
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to a TOML config file (default: ./dial_config.toml if present)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log every rotation and the position it lands on",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print the number of rotations and the largest moves each way",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    configure_logging("DEBUG" if args.debug else config.log_level, config.log_file)

    filename = args.input_file or config.input_file
    part = args.part or config.part
    input_text = read_input_file(filename)
    logger.info(f"Solving part {part} from {filename}")

    if args.stats:
        print_stats(input_text)

    password = solve_puzzle(input_text, PARTS[part], config.initial_position)
    print(f"Password: {password}")
    return 0
