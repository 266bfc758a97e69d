"""
Command line for the Lambic interpreter.

    lambic program.scm

evaluates program.scm and prints the value of its last expression.

    lambic

starts an interactive read-eval-print loop. Errors are reported per
expression and the session carries on.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from lambic.config import LOG_LEVELS, get_log_level
from lambic.errors import LambicError, ParseError
from lambic.interpreter import Interpreter
from lambic.printer import to_string
from lambic.reader.parser import read_all

logger = logging.getLogger(__name__)

PROMPT = "lambic> "
CONTINUATION = "....... "

parser = argparse.ArgumentParser(
    prog="lambic",
    description="Interpreter for a small lexically scoped Lisp.",
)
parser.add_argument("program", nargs="?", help="source file to evaluate; omit for a REPL")
parser.add_argument("--log-level", default=None, type=str.upper,
                    choices=LOG_LEVELS,
                    help="logging level (default: $LAMBIC_LOG_LEVEL or WARNING)")


def run_file(interp: Interpreter, path: Path, stdout: TextIO, stderr: TextIO) -> int:
    logger.info("Evaluating %s", path)
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as ex:
        print(f"lambic: cannot read {path}: {ex.strerror}", file=stderr)
        return 1
    try:
        result = interp.eval(source)
    except LambicError as ex:
        print(f"{type(ex).__name__}: {ex}", file=stderr)
        return 1
    print(to_string(result), file=stdout)
    return 0


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    buffer = ""
    stdout.write(PROMPT)
    stdout.flush()
    for line in stdin:
        buffer += line
        try:
            exprs = read_all(buffer)
        except ParseError as ex:
            if ex.incomplete:
                stdout.write(CONTINUATION)
                stdout.flush()
                continue
            print(f"ParseError: {ex}", file=stderr)
            exprs = []
        buffer = ""
        for expr in exprs:
            try:
                result = interp.eval_expr(expr)
            except LambicError as ex:
                print(f"{type(ex).__name__}: {ex}", file=stderr)
                break
            print(to_string(result), file=stdout)
        stdout.write(PROMPT)
        stdout.flush()
    stdout.write("\n")
    return 0


def main(
    argv: list[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level or get_log_level())
    interp = Interpreter()
    if args.program:
        return run_file(interp, Path(args.program), stdout, stderr)
    return repl(interp, stdin, stdout, stderr)
