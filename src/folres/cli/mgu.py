"""Command line entry point: most general unifier of two term lists.

Usage:
    folres-mgu "f(:x), :y === f(a), :x"
    echo "g(:x) === f(a)" | folres-mgu --file -

Variables are written ``:x``; every other identifier is a function or
constant symbol. Prints ``MGU = {...}``, or ``MGU = None`` when the lists do
not unify.
"""

import argparse
import logging
import sys
from typing import List, Optional

from folres.core.exceptions import FolresError
from folres.core.unification import mgu_terms
from folres.fileformats.parser import parse_unifiable, read_text
from folres.proofs.printer import Printer


logger = logging.getLogger(__name__)

EXIT_UNIFIED = 0
EXIT_NOT_UNIFIABLE = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folres-mgu",
        description="Most general unifier of two term lists",
    )
    parser.add_argument("query", nargs="?", help="term lists such as 'f(:x) === f(a)'")
    parser.add_argument("--file", help="read the query from a file, - for standard input")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.query is None) == (args.file is None):
        parser.error("give either a query or --file")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        text = args.query if args.file is None else read_text(args.file)
        (left, right), table, _ = parse_unifiable(text)
    except (FolresError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if len(left) != len(right):
        logger.info("Term lists have different lengths: %d and %d", len(left), len(right))

    unifier = mgu_terms(left, right)
    if unifier is None:
        print("MGU = None")
        return EXIT_NOT_UNIFIABLE

    print(f"MGU = {Printer(table).unifier(unifier)}")
    return EXIT_UNIFIED


if __name__ == "__main__":
    sys.exit(main())
