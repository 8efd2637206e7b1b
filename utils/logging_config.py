"""
Centralized Logging Configuration

Provides logging for the pricing engine with:
- Configurable log levels
- Automatic log rotation
- Console output for command-line runs
"""

import logging
import logging.handlers
from pathlib import Path

import config


def setup_logging(log_level_str: str | None = None):
    """
    Initialize centralized logging configuration.

    Call this function once at application startup (in run.py).

    Configuration:
    - Log level from config.LOG_LEVEL unless overridden (DEBUG, INFO, WARNING, ERROR)
    - Automatic rotation every midnight
    - Keeps logs for config.LOG_RETENTION_DAYS days
    - Writes to <config.LOG_DIR>/pricing.log

    Args:
        log_level_str: Optional level name overriding config.LOG_LEVEL
    """
    # Create logs directory if it doesn't exist
    log_dir = Path(getattr(config, "LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    if log_level_str is None:
        log_level_str = getattr(config, "LOG_LEVEL", "INFO")
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    retention_days = getattr(config, "LOG_RETENTION_DAYS", 7)

    formatter = logging.Formatter(
        fmt='%(asctime)s | %(name)-25s | %(levelname)-8s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=log_dir / "pricing.log",
        when="midnight",          # Rotate at midnight
        interval=1,               # Every 1 day
        backupCount=retention_days,  # Keep N days of logs
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(log_level)

    # Console goes to stderr so stdout stays clean for the JSON result
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    logging.info(f"Logging initialized: Level={log_level_str}, Retention={retention_days} days")
