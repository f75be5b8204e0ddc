"""
Command-line entry point: `posbraid GENUS [--debug]`.

Writes every accepted braid word with the DT code of its closure to
standard output. A missing or malformed genus is reported on standard
error and the program exits normally without searching.
"""

import argparse
import sys
from typing import List, Optional

from .config import SearchConfig
from .errors import UsageError
from .search import BraidSearch

USAGE_MESSAGE = "One non-negative integer as parameter required."


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def _genus(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid genus {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid genus {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="posbraid",
        description="List positive braid words whose closures include all "
                    "prime positive braid knots of the given genus, with "
                    "DT codes.",
    )
    parser.add_argument("genus", type=_genus, help="genus of the knots")
    parser.add_argument("--debug", action="store_true",
                        help="narrate every search step on stderr")
    return parser


def main(argv: Optional[List[str]] = None, stdout=None, stderr=None) -> int:
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    try:
        args = build_parser().parse_args(argv)
    except UsageError as e:
        print(f"{USAGE_MESSAGE} ({e})", file=stderr)
        return 0

    config = SearchConfig(genus=args.genus, debug=args.debug,
                          output=stdout, diagnostics=stderr)
    config.log(f"Working on genus {config.genus}.")
    BraidSearch(config).write_results()
    return 0


if __name__ == "__main__":
    sys.exit(main())
