"""Logging setup for scripts and interactive use."""
import logging
from typing import Optional

from .settings import get_settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Simple root logging configuration."""
    log_level_name = level or get_settings().log_level
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    logger = logging.getLogger("gearbox_pricing")
    logger.setLevel(log_level)
    logger.info("Logging configured, level=%s", log_level_name)
