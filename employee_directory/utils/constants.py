"""
================================================================================
CONSTANTS - System-Wide Configuration Values
================================================================================

Centralized repository for the hardcoded constants used throughout the
employee directory. Organized by functional category.

Constant Categories:
    1. File Paths - Config and log locations
    2. Seed Data - Records loaded on every start
    3. Record Fields - Names accepted by "modify"
    4. Console Layout - Banner widths and prompts

Key Constants:

    SEED_EMPLOYEES
        The five records every run starts with. Data is never persisted,
        so these are the only accounts available for the first login.

    MODIFIABLE_FIELDS
        Fields HR may change. user_id and role are fixed once a record
        exists.

File Path Constants:
    All paths are relative to BASE_DIR (current working directory)
    Supports monkeypatching for test isolation

    Example:
        CONFIG_FILE = BASE_DIR / 'configs' / 'config.json'
        LOG_DIR = BASE_DIR / 'outputs' / 'logs'

Note:
    Values in this file are STATIC. For runtime-configurable settings,
    use config.json via employee_directory.utils.config.

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

from pathlib import Path

# ==========================================
# FILE PATHS
# ==========================================
BASE_DIR = Path.cwd()
OUTPUT_DIR = BASE_DIR / 'outputs'
LOG_DIR = OUTPUT_DIR / 'logs'
CONFIG_FILE = BASE_DIR / 'configs' / 'config.json'

# ==========================================
# LOGGING
# ==========================================
LOGGER_NAME = "employee_directory"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(run_context)s]: %(message)s"
LOG_MAX_BYTES = 5_000_000  # 5MB
LOG_BACKUP_COUNT = 5

# ==========================================
# SEED DATA
# ==========================================
# (name, user_id, department, position, salary, role)
SEED_EMPLOYEES = [
    ("Sarah Johnson", 1001, "Human Resources", "HR Manager", "75000", "HR"),
    ("Mike Davis", 2001, "Operations", "Operations Manager", "85000", "Management"),
    ("John Smith", 3001, "IT", "Software Developer", "65000", "General"),
    ("Emily Brown", 3002, "Marketing", "Marketing Specialist", "55000", "General"),
    ("David Wilson", 3003, "Finance", "Financial Analyst", "60000", "General"),
]

# ==========================================
# RECORD FIELDS
# ==========================================
MODIFIABLE_FIELDS = ('name', 'department', 'position', 'salary')
TEXT_FIELDS = ('name', 'department', 'position')

# ==========================================
# CONSOLE LAYOUT
# ==========================================
DIVIDER_WIDTH = 40
DEFAULT_CURRENCY_SYMBOL = "$"
YES_ANSWERS = ('y', 'Y')
