"""Logging setup for comparison runs.

structlog renders through stdlib ``logging`` so that each configured output
(stderr, stdout or a file) filters on its own level. Events emitted while a
comparison runs carry that run's ``run_id``.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from bumpcheck.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)

# First file output of the active configuration
_log_file: Path | None = None


def set_run_id(run_id: str | None = None) -> str:
    """Mark the start of a comparison run, generating an id unless given one."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def get_run_id() -> str | None:
    return _run_id.get()


def clear_run_id() -> None:
    _run_id.set(None)


def get_log_file_path() -> Path | None:
    """Where the current configuration writes its file log, if anywhere."""
    return _log_file


def _add_run_id(_logger: Any, _method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    rid = _run_id.get()
    if rid is not None:
        event_dict["run_id"] = rid
    return event_dict


def configure_logging(*, config: LoggingConfig | None = None, level: str = "WARNING") -> None:
    """Install the outputs of ``config`` on the root logger, replacing previous ones.

    Without a config, a single console output on stderr at ``level`` is used.
    """
    from bumpcheck.config.models import LoggingConfig

    global _log_file

    if config is None:
        config = LoggingConfig(level=level.upper())

    root_level = logging.getLevelNamesMapping()[config.level]
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
        _add_run_id,
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(root_level)

    _log_file = None
    for output in config.outputs:
        handler = _open_output(output)
        handler.setLevel(output.level or config.level)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=_renderer(output, handler),
                foreign_pre_chain=pre_chain,
            )
        )
        root.addHandler(handler)


def _open_output(output: LogOutputConfig) -> logging.Handler:
    global _log_file

    if output.destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if output.destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    if _log_file is None:
        _log_file = path
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _renderer(output: LogOutputConfig, handler: logging.Handler) -> structlog.types.Processor:
    if output.format == "json":
        return structlog.processors.JSONRenderer()
    stream = getattr(handler, "stream", None)
    colors = not isinstance(handler, logging.FileHandler) and bool(stream and stream.isatty())
    return structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0)
