"""Logging for dockmatch — structlog events routed through stdlib handlers.

Match results go to stdout, so every log line is written to stderr.
"""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

LEVEL_ENV = "DOCKMATCH_LOG_LEVEL"
FORMAT_ENV = "DOCKMATCH_LOG_FORMAT"

# Third-party loggers that are noisy at DEBUG.
_QUIET_LOGGERS = ("httpx", "httpcore")


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    *level* wins over ``DOCKMATCH_LOG_LEVEL`` (default WARNING);
    ``DOCKMATCH_LOG_FORMAT`` picks ``console`` or ``json`` output.
    """
    log_level = (level or os.environ.get(LEVEL_ENV) or "WARNING").upper()
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers = {name: {"level": "WARNING"} for name in _QUIET_LOGGERS}
    loggers["dockmatch"] = {"level": log_level}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "dockmatch": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(os.environ.get(FORMAT_ENV, "console").lower()),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "dockmatch",
                },
            },
            "root": {"handlers": ["stderr"], "level": log_level},
            "loggers": loggers,
        }
    )
