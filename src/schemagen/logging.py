"""Logging setup for schemagen.

Generated documents go to stdout, so every log line is routed to stderr
through the ``schemagen`` stdlib logger. Records from structlog and from
plain ``logging`` calls share one formatter, and the root logger is left
untouched for applications that embed the library.
"""

import logging
import sys
from typing import Any, TextIO

import structlog

LOGGER_NAME = "schemagen"


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that resolves ``sys.stderr`` on every write.

    Test runners and click's CliRunner swap ``sys.stderr`` after the
    handler is installed.
    """

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_logging(log_level: str = "warning", log_format: str = "console") -> None:
    """Route schemagen's structlog events to stderr.

    Calling this again replaces the previous handler, so the CLI and tests
    can reconfigure without duplicating output.

    Args:
        log_level: Level name (debug, info, warning, error)
        log_format: "json" for one JSON object per line, "console" otherwise
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
        pre_render: list[Any] = [structlog.processors.format_exc_info]
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        pre_render = []

    shared = _shared_processors()
    handler = _StderrHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *pre_render,
                renderer,
            ],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    for old in [h for h in package_logger.handlers if isinstance(h, _StderrHandler)]:
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
