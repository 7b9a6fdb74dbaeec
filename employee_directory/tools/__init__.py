"""
================================================================================
TOOLS MODULE - User-Facing Console Tools
================================================================================

Exported Classes:
    EmployeeConsole - Interactive login + role-based menu loop

Exported Functions:
    render_table - pandas table of employee records
    credential_lines - Login hints for the seeded accounts

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

from employee_directory.tools.console import EmployeeConsole, render_table, credential_lines

__all__ = ['EmployeeConsole', 'render_table', 'credential_lines']
