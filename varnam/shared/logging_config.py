# varnam\shared\logging_config.py
import logging
import sys
from typing import Optional

import structlog

from varnam.shared.config import settings

LOGGER_NAMESPACE = "varnam"

# Library default: stay silent until the host application (or the CLI) configures logging.
logging.getLogger(LOGGER_NAMESPACE).addHandler(logging.NullHandler())


def get_logger(name: str = LOGGER_NAMESPACE):
    """
    structlog logger backed by the stdlib logger `name`.
    Output is decided by stdlib handlers, never printed directly.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(log_format: Optional[str] = None, log_level: Optional[str] = None):
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).

    Library code never calls this; it is for entry points (the CLI, or an
    embedding application that wants our log format).
    """
    log_format = log_format or settings.LOG_FORMAT
    log_level = (log_level or settings.LOG_LEVEL).upper()

    # 1. Define the chain of processors
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog on top of the standard library
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Logs go to stderr so command output on stdout stays clean
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )
    logging.getLogger().setLevel(log_level)
