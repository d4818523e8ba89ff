"""
Structured logging configuration.

Django owns the handler setup through ``LOGGING``; structlog renders the
event dicts through ``structlog.stdlib.ProcessorFormatter`` so that Django's
own records and application events share one output format.
"""
from typing import Any

import structlog


SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def build_logging_config(*, level: str = "INFO", json_output: bool = True) -> dict[str, Any]:
    """
    Build the ``LOGGING`` dict for Django settings.

    Args:
        level: Root log level name
        json_output: Render JSON lines instead of coloured console output

    Returns:
        dictConfig-compatible dictionary
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structlog": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
                "foreign_pre_chain": SHARED_PROCESSORS,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structlog",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        "loggers": {
            "django.db.backends": {"level": "WARNING"},
            "stripe": {"level": "INFO"},
            "urllib3": {"level": "WARNING"},
        },
    }


def configure_structlog(*, json_output: bool = True) -> None:
    """Configure structlog to hand events over to the stdlib handlers."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *SHARED_PROCESSORS,
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
