"""Run configuration built once from the command line."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from insert_text.operations import (
    Append,
    Clear,
    ClearRange,
    DefaultAppendEmpty,
    Insert,
    Operation,
)

TextSource = Callable[[], str]


def select_operation(
    *,
    insert: Optional[str] = None,
    insert_given: bool = False,
    append: Optional[str] = None,
    append_given: bool = False,
    clear: Optional[ClearRange] = None,
    line: Optional[int] = None,
    overwrite: bool = False,
    interactive_text: Optional[str] = None,
) -> Operation:
    """Map parsed flags to exactly one operation.

    ``interactive_text`` replaces any flag value for insert and append. With
    no operation flag, stdin text is inserted when ``line`` or ``overwrite``
    addresses a line and appended otherwise.
    """

    if clear is not None:
        return Clear(clear)
    if append_given:
        text = interactive_text if interactive_text is not None else append
        return Append(text or "")
    if insert_given or line is not None or overwrite:
        text = interactive_text if interactive_text is not None else insert
        return Insert(text or "", at=line, overwrite=overwrite)
    if interactive_text is not None:
        return Append(interactive_text)
    return DefaultAppendEmpty()


@dataclass(frozen=True, slots=True)
class EditConfig:
    paths: Tuple[str, ...]
    operation: Operation
    backup: bool = False
    dry_run: bool = False

    def __post_init__(self) -> None:
        if not self.paths:
            raise ValueError("EditConfig requires at least one path")

    @classmethod
    def from_namespace(
        cls, args: argparse.Namespace, *, read_stdin: TextSource
    ) -> "EditConfig":
        interactive_text = None
        if args.interactive and args.clear is None:
            interactive_text = read_stdin().rstrip()
        operation = select_operation(
            insert=args.insert,
            insert_given=args.insert is not None,
            append=args.append,
            append_given=args.append is not None,
            clear=args.clear,
            line=args.line,
            overwrite=args.overwrite,
            interactive_text=interactive_text,
        )
        return cls(
            paths=tuple(args.files),
            operation=operation,
            backup=args.backup,
            dry_run=args.dry_run,
        )
