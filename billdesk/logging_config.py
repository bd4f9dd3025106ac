"""
Logging setup.

Modules log through `logging.getLogger(__name__)`; this installs the
root handler once, in the text or JSON format chosen in settings. JSON
lines are rendered by structlog's stdlib ProcessorFormatter.
"""
import logging
import sys
from typing import Optional

import structlog

from .config import AppSettings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Formatter emitting one JSON object per stdlib log record."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(settings: Optional[AppSettings] = None) -> None:
    """Configure the root logger from settings."""
    settings = settings or get_settings()

    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == 'json':
        handler.setFormatter(json_formatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    logging.basicConfig(
        level=settings.log_level.upper(),
        handlers=[handler],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
