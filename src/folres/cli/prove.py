"""Command line entry point: decide whether a statement holds.

Usage:
    folres-prove "all x: (P(x) -> Q(x)) & some x: P(x) |- some x: Q(x)"
    folres-prove --file problem.txt --tseitin -v
    cat problem.txt | folres-prove --file -

The first line printed is the outcome: ``proven``, ``disproven``,
``exhausted`` (saturated without a contradiction) or ``undecided`` (the step
budget ran out).
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml
from tqdm import tqdm

from folres.core.exceptions import FolresError
from folres.fileformats.parser import parse_statement, read_file
from folres.proofs.printer import Printer
from folres.prover import prepare, run, UNDECIDED
from folres.utils.config import Config, ResolverConfig


EXIT_DECIDED = 0
EXIT_UNDECIDED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folres-prove",
        description="First-order resolution prover",
    )
    parser.add_argument("statement", nargs="?", help="statement such as 'P, P -> Q |- Q'")
    parser.add_argument("--file", help="read the statement from a file, - for standard input")
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument("--tseitin", action="store_true", help="use the Tseitin transformation")
    parser.add_argument("--max-steps", type=int, help="step budget, 0 for no budget")
    parser.add_argument("--heuristic", help="clause selection heuristic")
    parser.add_argument("--prefer-counterproof", action="store_true",
                        help="try to refute the statement instead of proving it")
    parser.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="print learned clauses; repeat for debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="print only the outcome")
    return parser


def resolver_config(args, config: Config) -> ResolverConfig:
    settings = ResolverConfig.from_config(config)
    return ResolverConfig(
        heuristic=args.heuristic or settings.heuristic,
        strategy='tseitin' if args.tseitin else settings.strategy,
        max_steps=args.max_steps if args.max_steps is not None else settings.max_steps,
        prefer_counterproof=args.prefer_counterproof or settings.prefer_counterproof,
    )


def configure_logging(verbosity: int, config: Config):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, str(config.get('logging.level', 'WARNING')).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.statement is None) == (args.file is None):
        parser.error("give either a statement or --file")

    try:
        config = Config(args.config)
        configure_logging(args.verbose, config)
        settings = resolver_config(args, config)

        if args.file is not None:
            statement, table, allocator = read_file(args.file)
        else:
            statement, table, allocator = parse_statement(args.statement)
        attempt = prepare(statement, table, settings, allocator)
    except (FolresError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    total = settings.max_steps or None
    with tqdm(total=total, desc="Resolving", unit="step", disable=args.no_progress or args.quiet,
              file=sys.stderr, leave=False) as pbar:
        def on_step(step):
            pbar.update(1)
            if step % 100 == 0:
                pbar.set_postfix({'Learned': len(attempt.resolver.kb), 'Pending': len(attempt.resolver.queue)})
        run(attempt, on_step)

    printer = Printer(table)
    print(attempt.outcome)

    if attempt.outcome == UNDECIDED:
        if args.verbose:
            print_learning_order(printer, attempt.resolver.stats().learning_order)
            print(f"No proof found after {settings.max_steps} steps.")
        return EXIT_UNDECIDED

    result = attempt.result
    if result.is_proven and not args.quiet:
        print("Refutation proof using resolution:")
        for line in printer.proof(result.proof.deductions):
            print(f"  {line}")

    if args.verbose:
        print_learning_order(printer, result.learning_order)
        print(f"{result.deductions_made} deductions made.")

    return EXIT_DECIDED


def print_learning_order(printer: Printer, clauses):
    print("Clauses in learning order:")
    for clause in clauses:
        print(f"  - {printer.clause(clause)}")


if __name__ == "__main__":
    sys.exit(main())
