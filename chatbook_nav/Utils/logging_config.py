"""
Logging configuration for chatbook_nav.

Call ``configure_logging`` once at startup; library code just imports the
loguru ``logger``.
"""

import sys
from typing import Any, Dict, Optional

from loguru import logger

from ..config import load_settings


def configure_logging(settings: Optional[Dict[str, Any]] = None) -> None:
    """
    Configure loguru sinks from the [Logging] section of the settings.

    Args:
        settings: Loaded settings; defaults are used when None
    """
    if settings is None:
        settings = load_settings()

    logging_section = settings.get("Logging", {})
    level = logging_section.get("log_level", "INFO")

    logger.remove()  # Remove default handler
    logger.add(sink=sys.stderr, level=level, colorize=True)

    log_file = logging_section.get("log_file")
    if log_file:
        logger.add(
            sink=log_file,
            level=level,
            rotation=logging_section.get("log_rotation", "10 MB"),
            retention=logging_section.get("log_retention", "7 days"),
        )

    logger.info(f"Navigation logging configured: level={level}, file={log_file or 'none'}")
