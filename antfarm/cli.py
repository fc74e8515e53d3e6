"""Command line entry: read a farm on standard input and print the ants' moves."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from antfarm.model import FarmError
from antfarm.output import simulate
from antfarm.parser import Parser
from antfarm.solver import solve

ERROR_MESSAGE = "\nError\n"


def split_lines(text: str) -> list[str]:
    """Split input into lines; a final newline does not start another line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def run(text: str, out: TextIO, err: TextIO) -> bool:
    """Echo the description, then print the moves or report an error.

    Returns True on success. Every input line is echoed, even after the
    description has been rejected.
    """
    parser = Parser()
    ok = True
    for line in split_lines(text):
        out.write(line + "\n")
        if ok:
            try:
                parser.feed(line)
            except FarmError:
                ok = False
    if ok:
        try:
            farm = parser.finish()
            solution = solve(farm)
        except FarmError:
            ok = False
        else:
            out.write("\n")
            if farm.total_ants > 0:
                for turn in simulate(farm, solution):
                    out.write(turn + "\n")
    if not ok:
        err.write(ERROR_MESSAGE)
    return ok


def main(argv: list[str] | None = None) -> int:
    """Run on standard input; return 0 on success, 1 on error."""
    arg_parser = argparse.ArgumentParser(
        prog="antfarm",
        description="Move ants through a farm described on standard input.",
    )
    arg_parser.parse_args(argv)
    text = sys.stdin.read()
    return 0 if run(text, sys.stdout, sys.stderr) else 1


if __name__ == "__main__":
    sys.exit(main())