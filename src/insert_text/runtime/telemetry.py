"""Structured logging and profiling for the edit pipeline, on telelog.

``record_event(name, ...)`` writes an ``event::<name>`` record and
``span(name, ...)`` profiles a block under a named component. The logger is
configured from ``INSERT_TEXT_*`` environment variables; console output
stays off unless ``INSERT_TEXT_LOG_CONSOLE`` is set because dry runs print
file content on stdout.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "INSERT_TEXT_"
LOGGER_NAME = "insert_text"

_logger: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def build_config() -> Any:
    config = tl.Config()
    config.with_min_level((_env("LOG_LEVEL") or "WARNING").upper())
    config.with_console_output(_env_flag("LOG_CONSOLE"))
    if _env_flag("LOG_CONSOLE"):
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = _env("LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    return config


def configure(config: Optional[Any] = None) -> None:
    """Rebuild the logger from ``config`` or, by default, the environment."""

    global _logger
    _logger = tl.Logger.with_config(LOGGER_NAME, config or build_config())


def get_logger() -> Any:
    if _logger is None:
        configure()
    return _logger


def _as_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    """Log ``message`` with ``data`` via ``<level>_with`` when the logger has it."""

    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, _as_pairs(data))
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str, *, level: str = "info", data: Optional[Dict[str, Any]] = None
) -> None:
    emit(get_logger(), level, f"event::{name}", {"event": name, **(data or {})})


@contextmanager
def span(
    name: str, *, component: str, context: Optional[Dict[str, Any]] = None
) -> Iterator[None]:
    """Profile the block as ``name`` inside ``component``.

    ``context`` is attached to every record logged inside the block. A
    failure inside the block is logged as ``span::fail`` and re-raised.
    """

    log = get_logger()
    keys = list(context or {})
    for key in keys:
        log.add_context(key, str(context[key]))  # type: ignore[index]
    try:
        with log.track_component(component), log.profile(name):
            yield
    except Exception as exc:
        emit(log, "error", "span::fail", {"span": name, "reason": exc})
        raise
    finally:
        for key in keys:
            log.remove_context(key)


__all__ = ["configure", "emit", "get_logger", "record_event", "span"]
