"""structlog setup for Paygate.

Every log line, ours and uvicorn's, goes through one stdout handler: JSON in
production, colored console output when DEBUG is on. The request's
X-Request-ID is attached as correlation_id.
"""

import logging
import logging.config

import structlog
from asgi_correlation_id.context import correlation_id

from paygate.core.config import Settings

# Noisy third-party loggers and the level they are capped at
QUIET_LOGGERS = {
    "uvicorn.access": "WARNING",
    "httpx": "WARNING",
    "httpcore": "WARNING",
}


def add_correlation_id(logger, method, event_dict):
    cid = correlation_id.get(None)
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib logging through a single renderer.

    Safe to call more than once; each app built by create_app() reapplies it.
    """
    level = "DEBUG" if settings.debug else "INFO"
    pre_chain = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_correlation_id,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if settings.debug:
        renderer = structlog.dev.ConsoleRenderer()
    else:
        # JSONRenderer cannot print exc_info=True itself
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "paygate": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": [
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    renderer,
                ],
                "foreign_pre_chain": pre_chain,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "paygate",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["stdout"], "level": level},
        "loggers": {name: {"level": lvl} for name, lvl in QUIET_LOGGERS.items()},
    })

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
