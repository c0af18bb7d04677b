"""structlog configuration for rosterctl.

Everything is written to stderr: stdout carries command results, and under
``serve --transport stdio`` it is the MCP channel itself, so a stray log
line there would corrupt the protocol stream.

Two renderers:
- Human (default): colored console output when stderr is a TTY
- JSON (--log-json): one structured object per line

Levels are set per logger from :data:`_LEVELS`. A one-shot command stays at
WARNING unless ``--verbose``. A running server also reports bootstrap and
startup events (files loaded, roster size, server ready) at INFO.
"""

from __future__ import annotations

import logging
import sys

import structlog

# logger name -> (default level, --verbose level); the root stays at WARNING
_LEVELS: dict[str, tuple[int, int]] = {
    "rosterctl": (logging.WARNING, logging.DEBUG),
    "rosterctl.infrastructure": (logging.WARNING, logging.DEBUG),
    "rosterctl.mcp": (logging.WARNING, logging.DEBUG),
    "mcp": (logging.WARNING, logging.INFO),
    "uvicorn": (logging.WARNING, logging.INFO),
    "httpx": (logging.WARNING, logging.WARNING),
}

# Raised to INFO for the lifetime of ``rosterctl serve``.
_SERVING_LOGGERS = ("rosterctl.infrastructure", "rosterctl.mcp")


def logger_levels(*, verbose: bool = False, serving: bool = False) -> dict[str, int]:
    """Resolve the level for every logger rosterctl manages."""
    levels = {name: pair[1] if verbose else pair[0] for name, pair in _LEVELS.items()}
    if serving and not verbose:
        for name in _SERVING_LOGGERS:
            levels[name] = logging.INFO
    return levels


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    serving: bool = False,
) -> None:
    """Configure structlog processors and route all records to stderr.

    Safe to call again (``serve`` does, once it knows it is a server): the
    root handler is replaced and every managed level is reset.

    Args:
        verbose: DEBUG for rosterctl, INFO for the MCP transport libraries.
        log_json: Use the JSON renderer instead of the console renderer.
        serving: Report bootstrap and server lifecycle events at INFO.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    for name, level in logger_levels(verbose=verbose, serving=serving).items():
        logging.getLogger(name).setLevel(level)
