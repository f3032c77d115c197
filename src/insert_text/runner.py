"""Per-file edit pipeline: check, back up, load, apply, write."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from insert_text.adapters import filesystem
from insert_text.buffer import LineBuffer, load
from insert_text.config import EditConfig
from insert_text.errors import AddressOutOfRangeError
from insert_text.operations import apply
from insert_text.runtime import telemetry


def process_file(
    path: str, config: EditConfig, *, stdout: Optional[TextIO] = None
) -> LineBuffer:
    """Run the configured operation against one file and return the result."""

    filesystem.check_target(path)

    if config.backup and not config.dry_run:
        destination = filesystem.create_backup(path)
        if destination is not None:
            telemetry.record_event(
                "file.backup", data={"path": path, "backup": destination}
            )

    buffer = load(filesystem.read_raw(path), path=path)
    try:
        updated = apply(buffer, config.operation)
    except AddressOutOfRangeError as exc:
        exc.with_path(path)
        raise

    if config.dry_run:
        filesystem.emit(updated, stdout or sys.stdout)
        telemetry.record_event(
            "file.dry_run", data={"path": path, "lines": updated.line_count}
        )
    else:
        written = filesystem.commit(path, updated)
        telemetry.record_event(
            "file.written",
            data={"path": path, "lines": updated.line_count, "bytes": written},
        )
    return updated


def run(config: EditConfig, *, stdout: Optional[TextIO] = None) -> None:
    """Process every path in order; the first failure aborts the rest."""

    telemetry.record_event(
        "run.start",
        data={
            "operation": config.operation.name,
            "files": len(config.paths),
            "dry_run": config.dry_run,
        },
    )
    with telemetry.span(
        "run", component="runner", context={"operation": config.operation.name}
    ):
        for path in config.paths:
            process_file(path, config, stdout=stdout)
    telemetry.record_event("run.complete", data={"files": len(config.paths)})


__all__ = ["process_file", "run"]
