"""
Logging Configuration Module

Provides consistent logging setup across the RAG engine packages.
Modules log through ``logging.getLogger(__name__)``; setup_logging attaches
handlers to each top-level package logger so every module is covered.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional


PACKAGE_LOGGERS = (
    "common",
    "chunking",
    "providers",
    "vector_store",
    "retrieval",
    "generation",
    "rag",
)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    packages: Iterable[str] = PACKAGE_LOGGERS,
) -> list[logging.Logger]:
    """
    Configure logging for the RAG engine.

    Log records go to stderr so that command output on stdout stays
    machine-readable.

    Args:
        level: Logging level (default: INFO)
        log_file: Optional path to log file
        format_string: Optional custom format string
        packages: Top-level logger names to configure

    Returns:
        The configured package loggers
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    loggers = []
    for name in packages:
        logger = get_logger(name)
        logger.setLevel(level)
        # Remove existing handlers to avoid duplicates
        logger.handlers.clear()
        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)
        logger.propagate = False
        loggers.append(logger)

    return loggers


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
