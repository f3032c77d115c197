"""Command-line entry point for ``it``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from insert_text import __version__
from insert_text.config import EditConfig
from insert_text.errors import LineEditError, MalformedRangeError
from insert_text.operations import ClearRange
from insert_text.runner import run
from insert_text.runtime import telemetry

PROG = "it"

EXAMPLES = """\
examples:
  Insert 'New Line' at line 2 in file.txt:
    $ it -i "New Line" -l 2 file.txt

  Overwrite line 2 with 'Overwritten' in file.txt:
    $ it -i "Overwritten" -l 2 -o file.txt

  Append 'Appended' to the end of file.txt:
    $ it -a "Appended" file.txt

  Clear from line 2 to the end in file.txt:
    $ it -z 2 file.txt

  Clear from line 2 to line 3 in file.txt:
    $ it -z 2,3 file.txt

  Append an empty line to file.txt (default):
    $ it file.txt

  Interactively insert text at line 2:
    $ echo "New Line" | it -i -l 2 -I file.txt

  Create a backup before modifying multiple files:
    $ it -b -a "Appended" file1.txt file2.txt
"""


def positive_int(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise argparse.ArgumentTypeError(f"invalid line number: '{value}'")
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("line numbers must be greater than 0")
    return number


def clear_range(value: str) -> ClearRange:
    try:
        return ClearRange.parse(value)
    except MalformedRangeError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Inserts text at a given line location of a file",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="The file(s) to modify")
    parser.add_argument(
        "-l",
        "--line",
        type=positive_int,
        metavar="NUMBER",
        help="The line number to insert or overwrite at (default: 1)",
    )
    parser.add_argument(
        "-o",
        "--overwrite",
        action="store_true",
        help="Overwrite the line instead of inserting",
    )
    operation = parser.add_mutually_exclusive_group()
    operation.add_argument(
        "-i",
        "--insert",
        nargs="?",
        const="",
        metavar="TEXT",
        help="Inserts text at the line provided by --line (default: first line)",
    )
    operation.add_argument(
        "-a",
        "--append",
        nargs="?",
        const="",
        metavar="TEXT",
        help="Inserts text at the last line of the file",
    )
    operation.add_argument(
        "-z",
        "--clear",
        type=clear_range,
        metavar="START[,END]",
        help="Clear to end of file from START, or the range START,END",
    )
    parser.add_argument(
        "-b",
        "--backup",
        action="store_true",
        help="Create a backup of the original file (adds .bak extension)",
    )
    parser.add_argument(
        "-I",
        "--interactive",
        action="store_true",
        help="Read text to insert or append from stdin",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Print changes to stdout without modifying the file",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Parse ``argv``, run the edit, and return the process exit status."""

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    try:
        config = EditConfig.from_namespace(args, read_stdin=stdin.read)
        run(config, stdout=stdout)
    except (LineEditError, OSError) as exc:
        telemetry.record_event(
            "run.failed",
            level="error",
            data={
                "error": type(exc).__name__,
                "path": getattr(exc, "path", None) or getattr(exc, "filename", None),
                "reason": str(exc),
            },
        )
        stderr.write(f"{PROG}: error: {exc}\n")
        return 1
    return 0


def entrypoint() -> None:
    sys.exit(main())


__all__ = ["build_parser", "main", "entrypoint"]
