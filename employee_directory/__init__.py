"""
================================================================================
EMPLOYEE DIRECTORY PACKAGE - Modular Source Code Organization
================================================================================

Top-level package for the in-memory employee directory.

Package Structure:
    employee_directory/core/   - Records, roles, access policy, store, session
    employee_directory/tools/  - Interactive console menu
    employee_directory/utils/  - Shared utilities (logging, config, constants)

Design Principles:
    - Separation of concerns
    - Access checks live next to the operations they gate
    - Test-friendly architecture (injectable input/output)
    - Clear public APIs

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

__version__ = "2026.1"
__author__ = "robertbiv"
