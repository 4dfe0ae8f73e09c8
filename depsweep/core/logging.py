"""structlog setup for the depsweep CLI.

Everything is routed through stdlib ``logging`` so third-party records share
the same renderer. Output goes to stderr; stdout belongs to the listing and
the prompt.
"""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

LOG_LEVEL_ENV = "DEPSWEEP_LOG_LEVEL"
LOG_FORMAT_ENV = "DEPSWEEP_LOG_FORMAT"


def _pre_chain(log_format: str) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    # Timestamps only matter once logs leave the terminal.
    if log_format == "json":
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    return processors


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging for one CLI run.

    *level* (``-v`` passes ``DEBUG``) wins over ``DEPSWEEP_LOG_LEVEL``, which
    defaults to ``WARNING``. ``DEPSWEEP_LOG_FORMAT`` selects ``console``
    (default) or ``json``.
    """
    log_level = (level or os.environ.get(LOG_LEVEL_ENV, "WARNING")).upper()
    log_format = os.environ.get(LOG_FORMAT_ENV, "console").lower()
    pre_chain = _pre_chain(log_format)

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "depsweep": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        _renderer(log_format),
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "depsweep",
                },
            },
            "root": {"handlers": ["stderr"], "level": "WARNING"},
            "loggers": {
                "depsweep": {"level": log_level},
            },
        }
    )
