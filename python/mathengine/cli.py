# MathEngine - Command Line
# Copyright (c) 2024 MathEngine Contributors. All rights reserved.

"""Interactive REPL and one-shot command line for MathEngine."""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Optional, TextIO

from .config import Config
from .exceptions import MathEngineError
from .lang import Interpreter

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")
RESULT_PREFIX = " |> "


def run_line(interpreter: Interpreter, line: str, out: TextIO) -> bool:
    """Evaluate one line and print the result or the error. Returns success."""
    try:
        result = interpreter.execute(line)
    except MathEngineError as e:
        print(f"{RESULT_PREFIX}{e}", file=out)
        return False
    print(f"{RESULT_PREFIX}{result}", file=out)
    return True


def repl(interpreter: Interpreter, out: TextIO = sys.stdout) -> None:
    """Read statements until exit, quit or end of input."""
    while True:
        try:
            line = input(interpreter.config.prompt).strip()
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            break
        if not line:
            continue
        if line.lower() in EXIT_COMMANDS:
            break
        run_line(interpreter, line, out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mathengine",
        description="Symbolic algebra: simplify, substitute and solve.",
    )
    parser.add_argument("-c", "--command", type=str, help="Evaluate one statement and exit")
    parser.add_argument("--precision", type=int, help="Float precision in bits")
    parser.add_argument("--exact", action="store_true", help="Read decimal literals as exact rationals")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = Config.from_env()
        if args.precision is not None:
            config = Config(precision=args.precision, exact_decimals=config.exact_decimals)
    except ValueError as e:
        print(f"mathengine: {e}", file=sys.stderr)
        return 2
    if args.exact:
        config.exact_decimals = True
    logger.debug(f"Using {config!r}")

    interpreter = Interpreter(config)
    if args.command is not None:
        return 0 if run_line(interpreter, args.command, sys.stdout) else 1

    repl(interpreter)
    return 0


if __name__ == "__main__":
    sys.exit(main())
