"""
Console logging setup for applications embedding the shadow analysis

Library modules only emit through loguru's ``logger``; sinks are configured
here, by the application, from ``ShadowConfig.logging``.
"""

import sys
from typing import Optional, TextIO

from loguru import logger

from .config import get_config, ShadowConfig


def setup_logging(
    verbose: bool = False,
    config: Optional[ShadowConfig] = None,
    sink: Optional[TextIO] = None
) -> int:
    """
    Replace loguru's sinks with a single console sink

    The level comes from ``config.logging.level``, or ``verbose_level`` when
    ``verbose`` is set. Returns the id of the new sink.
    """
    settings = (config or get_config()).logging
    logger.remove()
    level = settings.verbose_level if verbose else settings.level
    return logger.add(
        sink or sys.stderr,
        format=settings.format,
        level=level
    )
