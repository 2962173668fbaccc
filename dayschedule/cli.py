"""
CLI (Command Line Interface).

    dayschedule                 interactive session on the keyboard
    dayschedule <input_file>    replay answers from a text file

The input file holds one answer per line, exactly what a user would type at
each prompt. Exit codes: 0 after quitting (or running out of input),
1 if the input file cannot be read, 2 for usage errors (argparse).
"""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from dayschedule.commands import ScheduleCommands
from dayschedule.interactive import keyboard_reader, replay_reader, run_interactive


def _read_lines(path: Path) -> list[str]:
    """
    Load the replay file. Raises OSError / UnicodeDecodeError on failure.
    """
    return path.read_text(encoding="utf-8").splitlines()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dayschedule", description="Daily schedule editor")
    parser.add_argument(
        "input_file",
        nargs="?",
        type=str,
        help="Replay answers from this file instead of the keyboard",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, runs the menu loop,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console(highlight=False)
    commands = ScheduleCommands()

    if args.input_file:
        path = Path(args.input_file)
        try:
            lines = _read_lines(path)
        except (OSError, UnicodeDecodeError) as exc:
            console.print(f"Cannot read input file {str(path)!r}: {exc}", markup=False)
            raise SystemExit(1)
        read = replay_reader(console, lines)
    else:
        read = keyboard_reader(console)

    run_interactive(commands, read, console)
    raise SystemExit(0)
