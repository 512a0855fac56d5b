"""
Logging Configuration

Provides a single setup_logging() function to configure logging
consistently for the library's command-line entry point.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None):
    """
    Configure logging.

    Level comes from the argument, else the LOG_LEVEL env var, else INFO.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    resolved = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
