# Copyright (c) 2026 coursedemos
# Licensed under the Apache License, Version 2.0

"""
Logging configuration for the ``coursedemos`` namespace.
"""

import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``coursedemos`` package logger.

    Parameters
    ----------
    level : int, default=logging.INFO
        Logging level for the logger and its handlers.

    log_file : str, optional
        Path of a file to write the log to, in addition to stdout.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    logger = logging.getLogger("coursedemos")
    logger.setLevel(level)

    # Calling twice must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger
