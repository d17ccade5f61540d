"""structlog setup for order-taking.

Events from ``order_taking.*`` loggers go to one stderr handler, rendered for
a console or as JSON lines.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "order_taking"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, level: str = "WARNING", log_json: bool = False) -> None:
    """Route structlog through a stdlib handler owned by the package logger.

    Safe to call again: the previous handler is replaced, not stacked.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers = [handler]
    package.propagate = False
    package.setLevel(level.upper())
