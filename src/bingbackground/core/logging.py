"""Structured logging configuration for bingbackground."""

import logging
from typing import List

import structlog

# Loggers of the HTTP and imaging stack, only useful when debugging
NOISY_LOGGERS = ("httpx", "httpcore", "PIL")

CALLSITE_PARAMETERS = [
    structlog.processors.CallsiteParameter.FILENAME,
    structlog.processors.CallsiteParameter.FUNC_NAME,
    structlog.processors.CallsiteParameter.LINENO,
]


def quiet_noisy_loggers(level: int) -> None:
    """Keep third-party chatter out of the console below DEBUG."""
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET if level <= logging.DEBUG else logging.WARNING)


def build_processors(debug: bool) -> List[structlog.types.Processor]:
    processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
    ]
    if debug:
        processors.append(structlog.processors.CallsiteParameterAdder(parameters=CALLSITE_PARAMETERS))
    processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def setup_structlog(log_level: str = "INFO") -> None:
    """Route structlog through stdlib logging with a console renderer."""
    numeric_level = getattr(logging, log_level.upper())

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
        force=True
    )
    quiet_noisy_loggers(numeric_level)

    structlog.configure(
        processors=build_processors(numeric_level <= logging.DEBUG),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger for the given name."""
    return structlog.get_logger(name)
