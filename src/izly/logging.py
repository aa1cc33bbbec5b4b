"""Logging setup for the IZLY command line.

Two handlers hang off the root logger:

- a Rich console handler on stderr, whose threshold follows -v/-q;
- a "flight recorder": a `MemoryHandler` that keeps DEBUG history in memory
  and writes it to a log file once something goes wrong (a WARNING, which
  is how the CLI reports a rejected purse operation).

While a purse is being driven, `purse_in_logs` stamps each record with the
purse balance and operation count, so the flight recorder file shows the
state the purse was in when every line was logged.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

    from izly.domain.purse import Purse

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "izly"

FLIGHT_RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s%(purse_suffix)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Give records from outside ``izly`` a ``[package]`` prefix on the console.

    Sets `record.prefix` to ``"[urllib3]"`` for ``urllib3.connectionpool``,
    and to an empty string for IZLY's own loggers. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


class PurseStateFilter(logging.Filter):
    """Stamp records with a snapshot of the purse being driven.

    The snapshot is taken when the record is handled, i.e. when it is
    logged, not when the flight recorder later writes it out.
    """

    def __init__(self, purse: Purse) -> None:
        super().__init__()
        self.purse = purse

    def filter(self, record: logging.LogRecord) -> bool:
        record.purse_state = (
            f"balance={self.purse.balance:.2f} "
            f"ops={self.purse.operations_used}/{self.purse.operation_budget}"
        )
        return True


class FlightRecorderFormatter(logging.Formatter):
    """File format of the flight recorder.

    Records stamped by `PurseStateFilter` end with ``[purse balance=... ops=...]``;
    other records are written unchanged.
    """

    def __init__(self) -> None:
        super().__init__(FLIGHT_RECORDER_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        state = getattr(record, "purse_state", None)
        record.purse_suffix = f" [purse {state}]" if state else ""
        return super().format(record)


@contextmanager
def purse_in_logs(purse: Purse) -> Iterator[PurseStateFilter]:
    """Stamp every record handled by the root handlers with `purse`'s state.

    The filter is attached to the handlers currently on the root logger and
    removed again on exit.
    """
    state_filter = PurseStateFilter(purse)
    handlers = list(logging.getLogger().handlers)
    for handler in handlers:
        handler.addFilter(state_filter)
    try:
        yield state_filter
    finally:
        for handler in handlers:
            handler.removeFilter(state_filter)


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Console threshold. Debug mode forces DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of the short third-party prefix.
        color: False disables colors, matching click-extra's ``--no-color``.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to `path`.

    The file is truncated when the handler is created. Up to `capacity`
    records are buffered; the buffer is written when a record at
    `flush_level` or above arrives, when it is full, and on close only if
    `flush_on_close` is set.
    """
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(FlightRecorderFormatter())

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line INFO summary, then DEBUG diagnostics for bug reports.

    The diagnostics cover the interpreter, platform, process, working
    directory, the Click and Rich versions in use, the active handlers, the
    flight recorder settings and per-logger level overrides.
    """
    logger.info(
        "IZLY %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    for dist in ("click", "rich"):
        logger.debug("%s: %s", dist.capitalize(), version(dist))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path or "<none>",
            flight_capacity,
            force_flush_fr,
        )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
