#!/usr/bin/env python3
"""Run a calculator program read from a file or stdin.

Usage:
    python -m polycalc program.txt
    python -m polycalc < program.txt

    # Trace every rejected line and executed command on stderr
    python -m polycalc program.txt --log-level DEBUG

Results go to stdout, ``ERROR <line> <REASON>`` diagnostics to stderr.  The
exit status is 0 unless the process runs out of memory.
"""

import argparse
import sys
from typing import List, Optional

from .calc.interpreter import Calculator
from .config import Config
from .logging_utils import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polycalc",
        description="Stack calculator for sparse multivariate integer polynomials",
    )
    parser.add_argument("file", nargs="?", default=None,
                        help="Program to run (default: read stdin)")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        help="Logging level for diagnostics on stderr")
    parser.add_argument("--recursion-limit", type=int, default=None,
                        help="Raise the interpreter recursion limit for deeply nested polynomials")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config(log_level=args.log_level, recursion_limit=args.recursion_limit)
    configure_logging(config.log_level)
    if config.recursion_limit is not None:
        sys.setrecursionlimit(config.recursion_limit)

    calculator = Calculator(config)
    try:
        if args.file is None:
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(errors="surrogateescape", newline="\n")
            calculator.run(sys.stdin)
        else:
            with open(args.file, encoding="utf-8", errors="surrogateescape", newline="\n") as f:
                calculator.run(f)
    except MemoryError:
        logger.critical("out of memory, aborting")
        return config.oom_exit_code
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
