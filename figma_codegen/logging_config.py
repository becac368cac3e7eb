"""Unified logging configuration for the code generator."""
from __future__ import annotations

import logging
import os
from pathlib import Path

DEFAULT_LOG_DIR = "logs"

# Prevent duplicate handlers
_configured_loggers: set[str] = set()


def configured_log_dir() -> Path | None:
    """LOG_DIR from the environment, read at call time; None when unset."""
    value = os.getenv("LOG_DIR")
    return Path(value) if value else None


def setup_logger(
    name: str,
    filename: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """Setup a logger with console and (optionally) file handlers.

    Args:
        name: Logger name (e.g., 'figma_codegen')
        filename: Log file name (e.g., 'codegen.log') under LOG_DIR, or
            ./logs when it is unset; None disables the file handler
        level: Level applied to the logger and its handlers

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if name in _configured_loggers:
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    logger.setLevel(level)
    logger.propagate = False  # Prevent duplicate logs

    if filename:
        log_dir = configured_log_dir() or Path.cwd() / DEFAULT_LOG_DIR
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / filename, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(logging.Formatter(
            "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
        ))
        logger.addHandler(fh)

    # Console handler
    sh = logging.StreamHandler()
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter(
        "%(asctime)s [%(name)s] %(message)s"
    ))
    logger.addHandler(sh)

    _configured_loggers.add(name)
    return logger


def get_cli_logger(verbose: bool = False) -> logging.Logger:
    """Logger for the command-line front-end (covers the whole package)."""
    # File logging only when LOG_DIR is explicitly configured
    return setup_logger(
        "figma_codegen",
        "codegen.log" if configured_log_dir() else None,
        level=logging.DEBUG if verbose else logging.INFO,
    )
