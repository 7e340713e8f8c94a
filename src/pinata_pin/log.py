"""Structured logging setup shared by the CLI and library callers."""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator
import structlog

PACKAGE_LOGGER = "pinata_pin"


def configure_structlog() -> None:
    """Route structlog through stdlib logging unless the host app already configured it."""
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@contextmanager
def stderr_logging(log_level: str) -> Iterator[logging.Handler]:
    """Send package logs at log_level and above to stderr for the duration of the block."""
    configure_structlog()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    previous_level = package_logger.level
    handler = logging.StreamHandler(sys.stderr)

    package_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))
    package_logger.addHandler(handler)
    try:
        yield handler
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
