"""
================================================================================
UTILS MODULE - Shared Utilities and Helpers
================================================================================

Shared infrastructure used across all application components.

Exported Functions:
    Logging:
        - setup_logging() - Initialize logging infrastructure
        - set_run_context(context) - Set execution context
        - logger - Main application logger

    Configuration:
        - load_config() - Load configuration from config.json
        - get_setting() - Read one value with a fallback

    Constants:
        - All system constants via wildcard import
        - File paths, seed records, field names

Usage:
    from employee_directory.utils import logger, load_config
    from employee_directory.utils.constants import SEED_EMPLOYEES

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

from .logger import setup_logging, set_run_context, logger
from .constants import *
from .config import load_config, get_setting

__all__ = [
    'setup_logging',
    'set_run_context',
    'logger',
    'load_config',
    'get_setting',
]
