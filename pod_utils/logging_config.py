"""
Structured logging setup for services embedding POD utilities
"""

import logging
import sys
from typing import Optional
import structlog

from .config import get_utilities_config


def configure_logging(level: Optional[str] = None, json: Optional[bool] = None) -> None:
    """
    Configure structlog over stdlib logging

    Args:
        level: Log level name (default from config)
        json: Render JSON lines instead of console output (default from config)
    """
    config = get_utilities_config()
    level = (level or config.log_level).upper()
    json = config.log_json if json is None else json

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    renderer = (structlog.processors.JSONRenderer() if json
                else structlog.dev.ConsoleRenderer())

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
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
