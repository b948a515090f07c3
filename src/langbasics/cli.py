"""Command line entry point: list and run the demo programs."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from langbasics.numeric import U32
from langbasics.programs import PROGRAMS, run_program
from langbasics.programs.control_flow import DEFAULT_INNER_BOUND, DEFAULT_START_COUNT
from langbasics.serialization import transcript_to_json, transcript_to_yaml

FORMATS = ["text", "json", "yaml"]


def set_logger_config(verbosity: int) -> None:
    logger = logging.getLogger("langbasics")
    logger.propagate = False
    logging_level = {0: logging.ERROR, 1: logging.INFO, 2: logging.DEBUG}[verbosity]
    logger.setLevel(logging.DEBUG)

    # Repeated main() calls in one process reuse the handler.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    formatter = logging.Formatter("[langbasics %(asctime)s ~ %(levelname)s]: %(message)s")
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging_level)
    logger.addHandler(console_handler)


def u32_argument(text: str) -> int:
    """argparse type: an integer that fits in U32."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{text}'") from None
    if not U32.min_value() <= value <= U32.max_value():
        raise argparse.ArgumentTypeError(
            f"{value} is out of range for U32 ({U32.min_value()}..{U32.max_value()})"
        )
    return value


def generate_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="langbasics",
        description="Run the basic language mechanics demo programs",
    )
    parser.add_argument("-v", "--verbosity", default=0, choices=[0, 1, 2], type=int)
    subparsers = parser.add_subparsers(required=True, dest="command")

    subparsers.add_parser("list", help="List the available programs")

    run_parser = subparsers.add_parser("run", help="Run one program")
    run_parser.add_argument("program", choices=sorted(PROGRAMS))
    run_parser.add_argument(
        "-f", "--format", default="text", choices=FORMATS, help="output format"
    )
    run_parser.add_argument(
        "--start-count",
        type=u32_argument,
        default=DEFAULT_START_COUNT,
        help="outer loop start value (control_flow)",
    )
    run_parser.add_argument(
        "--inner-bound",
        type=u32_argument,
        default=DEFAULT_INNER_BOUND,
        help="inner loop start value (control_flow)",
    )
    run_parser.add_argument(
        "--shadowing",
        action="store_true",
        help="also run the shadowing example (variables)",
    )
    return parser


def _program_options(args: argparse.Namespace) -> dict:
    if args.program == "control_flow":
        return {"start_count": args.start_count, "inner_bound": args.inner_bound}
    if args.program == "variables":
        return {"include_shadowing": args.shadowing}
    return {}


def main(argv: Optional[List[str]] = None) -> int:
    parser = generate_parser()
    args = parser.parse_args(argv)
    set_logger_config(args.verbosity)
    logger = logging.getLogger("langbasics")

    if args.command == "list":
        for name in sorted(PROGRAMS):
            print(name)
        return 0

    logger.info("running %s", args.program)
    echo = args.format == "text"
    transcript = run_program(args.program, echo=echo, **_program_options(args))

    if args.format == "json":
        print(transcript_to_json(transcript))
    elif args.format == "yaml":
        print(transcript_to_yaml(transcript), end="")

    logger.info("%s printed %d line(s)", args.program, len(transcript.lines))
    return 0
