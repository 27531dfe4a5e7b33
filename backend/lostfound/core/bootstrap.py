"""Process setup for applications embedding the matcher."""

from __future__ import annotations

import structlog

from lostfound.core.config import Settings, get_settings
from lostfound.core.logging import setup_logging

logger = structlog.get_logger("lostfound.bootstrap")


def configure(settings: Settings | None = None, log_to_file: bool = True) -> Settings:
    """Create the data directories and set up logging from settings.

    Call once at process start. The matcher itself never does this: scoring
    only reads settings.json.

    Args:
        settings: Settings to apply (defaults to get_settings())
        log_to_file: Write logs to <data_dir>/logs instead of stdout

    Returns:
        The applied settings
    """
    if settings is None:
        settings = get_settings()

    settings.ensure_directories()
    setup_logging(
        debug=settings.is_debug,
        logs_dir=settings.logs_dir if log_to_file else None,
        level=settings.log_level,
    )

    logger.info(
        "Lost & found matcher configured",
        env=settings.env,
        data_dir=str(settings.data_dir),
    )
    return settings
