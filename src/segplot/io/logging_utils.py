"""
logging_utils.py
================

Central logging setup for segplot.

• One "segplot" logger; library modules log through child loggers
  (logging.getLogger(__name__))
• Console always, file optional
• Repeated calls do not add duplicate handlers
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "segplot"

FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logger(log_path: Optional[Union[str, Path]] = None, level: str = "INFO") -> logging.Logger:
    """
    Create and configure the segplot logger.

    Parameters
    ----------
    log_path : Path, optional
        Also write to this file (parent directories are created).
    level : str
        "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"

    Returns
    -------
    logger : logging.Logger
    """
    logger = logging.getLogger(LOGGER_NAME)

    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)

    ch = logging.StreamHandler()
    ch.setLevel(logger.level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_path is not None:
        log_path = Path(log_path).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, mode="w")
        fh.setLevel(logger.level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
        logger.info(f"Logging to file: {log_path}")

    logger.debug("Logger initialized")
    return logger
