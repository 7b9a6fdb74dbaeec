"""
================================================================================
LOGGER - Unified Logging Configuration
================================================================================

Centralized logging infrastructure for all application contexts.

Logging Contexts:
    - 'cli' - Interactive console sessions started from cli.py
    - 'test' - Unit and integration tests
    - 'imported' - Library/module imports (minimal logging)

Log Destinations:
    1. Console Output - stderr, so log lines never mix with menu output
    2. File Logs - outputs/logs/{timestamp}.{context}.log (opt-in)
    3. Rotating Backups - 5MB max per file, 5 backup files

Log Format:
    {timestamp} {level} [{context}]: {message}
    Example: 2026-10-18 10:30:45 INFO [cli]: Login succeeded for user 1001

Features:
    - Context-aware records (run context stamped on every line)
    - Rotating file handlers (prevents disk space issues)
    - UTF-8 encoding support
    - Graceful fallback if log directory unavailable

Usage:
    from employee_directory.utils.logger import set_run_context, logger

    set_run_context('cli', level='INFO')
    logger.info('Directory started')

Configuration:
    File logging is disabled unless config.json sets logging.file_enabled.
    Level defaults to WARNING and follows logging.level.

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

import sys
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler

from employee_directory.utils.constants import (
    LOGGER_NAME,
    LOG_FORMAT,
    LOG_MAX_BYTES,
    LOG_BACKUP_COUNT,
)

logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.INFO)

# Global run context state
_RUN_CONTEXT = 'imported'


class RunContextFilter(logging.Filter):
    """
    Logging filter that adds run context to all log records
    Allows distinguishing between different execution contexts
    """

    def filter(self, record):
        record.run_context = _RUN_CONTEXT
        return True


def get_run_context() -> str:
    return _RUN_CONTEXT


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def set_run_context(context: str, level='WARNING', file_enabled: bool = False):
    """
    Set the execution context for logging and rebuild handlers

    Args:
        context: String identifier ('cli', 'test', etc)
        level: Handler level name or number
        file_enabled: Also write a rotating log file under LOG_DIR
    """
    global _RUN_CONTEXT
    _RUN_CONTEXT = context
    handler_level = _resolve_level(level)
    logger.setLevel(min(handler_level, logging.INFO))

    # Clear existing handlers
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if file_enabled:
        try:
            from employee_directory.utils.constants import LOG_DIR

            LOG_DIR.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            log_file = LOG_DIR / f"{timestamp}.{context}.log"

            file_handler = RotatingFileHandler(
                str(log_file),
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.INFO)
            file_handler.setFormatter(formatter)
            file_handler.addFilter(RunContextFilter())
            logger.addHandler(file_handler)
        except OSError as e:
            # Fall through to console-only logging
            sys.stderr.write(f"Log file unavailable: {e}\n")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(handler_level)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(RunContextFilter())
    logger.addHandler(console_handler)


def setup_logging(context: str = 'imported', config: dict = None):
    """
    Initialize logging for the application

    Args:
        context: Execution context identifier
        config: Loaded configuration (logging section is honoured)
    """
    settings = (config or {}).get('logging')
    if not isinstance(settings, dict):
        settings = {}
    set_run_context(
        context,
        level=settings.get('level', 'WARNING'),
        file_enabled=bool(settings.get('file_enabled', False)),
    )
    return logger


# Initialize with default context
set_run_context(_RUN_CONTEXT)
