"""Structured logging setup for orgtree."""

import os
from pathlib import Path
from typing import Any, Optional

import structlog

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(log_dir: Optional[Path] = None) -> Path:
    """
    Configure structlog for JSON logging to ~/.cache/orgtree/logs/orgtree.log.

    The library never calls this itself; applications embedding orgtree
    call it once at startup.

    Log level can be controlled via ORGTREE_LOG_LEVEL environment variable
    (DEBUG, INFO, WARNING or ERROR; defaults to INFO).

    Example:
        export ORGTREE_LOG_LEVEL=DEBUG
        tail -f ~/.cache/orgtree/logs/orgtree.log | jq .

    Args:
        log_dir: Directory for the log file (default: ~/.cache/orgtree/logs)

    Returns:
        Path of the log file
    """
    if log_dir is None:
        log_dir = Path.home() / ".cache" / "orgtree" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "orgtree.log"

    log_level = os.environ.get("ORGTREE_LOG_LEVEL", "INFO").upper()
    if log_level not in VALID_LEVELS:
        log_level = "INFO"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=open(log_file, "a")),
        cache_logger_on_first_use=True,
    )

    return log_file


def get_logger(name: str) -> Any:
    """
    Get a structured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("outline_parsed", lines=120, headings=14)
    """
    return structlog.get_logger(name)
