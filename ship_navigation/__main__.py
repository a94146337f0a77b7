from __future__ import annotations

import argparse
import sys
from pathlib import Path

from ship_navigation.engine import HEADING_RULES, WAYPOINT_RULES, plot, plot_with_waypoint
from ship_navigation.instructions import (
    Instruction,
    InstructionFormatError,
    load_instructions,
    read_instructions,
)
from ship_navigation.models import Ship, manhattan_distance
from ship_navigation.trace import render_trace, run_with_trace


def _read_input(args: argparse.Namespace) -> list[Instruction]:
    if args.input:
        return load_instructions(Path(str(args.input)))
    return read_instructions(sys.stdin.read().splitlines())


def _cmd_run(args: argparse.Namespace) -> int:
    # Parsing is a complete pre-pass: nothing is printed unless every line is valid.
    try:
        instructions = _read_input(args)
    except InstructionFormatError as e:
        print(f"ERROR: invalid instructions: {e}", file=sys.stderr)
        return 2

    if args.trace:
        for rules in (HEADING_RULES, WAYPOINT_RULES):
            sys.stdout.write(render_trace(run_with_trace(instructions, rules), rules))

    # Each rule set gets its own Ship.
    north, east = plot(Ship(), instructions)
    print(f"manhattan distance is {manhattan_distance(north, east)}")

    north, east = plot_with_waypoint(Ship(), instructions)
    print(f"manhattan distance is {manhattan_distance(north, east)}")

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="ship_navigation",
        description=(
            "Ship Navigation Simulator.\n"
            "\n"
            "Plots a ship through N/S/E/W/F/R/L instructions read from stdin under\n"
            "heading rules and waypoint rules, and prints both Manhattan distances."
        ),
    )
    # A bare invocation behaves like `run` with no options.
    parser.set_defaults(func=_cmd_run, input=None, trace=False)

    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Plot the instructions and print both Manhattan distances.")
    run.add_argument(
        "--input",
        type=str,
        default=None,
        help="Instruction file (one instruction per line). Reads stdin when omitted.",
    )
    run.add_argument("--trace", action="store_true", help="Print a per-instruction trace for both rule sets.")
    run.set_defaults(func=_cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
