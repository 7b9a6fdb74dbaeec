"""
================================================================================
CORE MODULE - Core Business Logic
================================================================================

Central package for employee records and the rules that guard them.

Exported Classes:
    Employee - One employee's stored attributes
    Role, Permission - Access tiers and the operations they grant
    EmployeeStore - Ordered in-memory record container
    Session - The single logged-in user
    EmployeeDirectory - Role-gated operations over store + session

Exported Functions:
    Access policy:
        - get_role_permissions, has_permission, require_permission
        - describe_access, menu_for
    Seed data:
        - seed_employees

Usage:
    from employee_directory.core import EmployeeDirectory, EmployeeStore

    directory = EmployeeDirectory(EmployeeStore.seeded())
    directory.login(1001)

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

from employee_directory.core.models import Employee, Role, Permission
from employee_directory.core.exceptions import (
    DirectoryError,
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    PermissionDeniedError,
    SelfDeleteError,
    NotLoggedInError,
)
from employee_directory.core.access import (
    MenuEntry,
    get_role_permissions,
    has_permission,
    require_permission,
    describe_access,
    menu_for,
)
from employee_directory.core.store import EmployeeStore, seed_employees
from employee_directory.core.session import Session
from employee_directory.core.directory import EmployeeDirectory

__all__ = [
    'Employee',
    'Role',
    'Permission',
    'DirectoryError',
    'DuplicateEmployeeError',
    'EmployeeNotFoundError',
    'PermissionDeniedError',
    'SelfDeleteError',
    'NotLoggedInError',
    'MenuEntry',
    'get_role_permissions',
    'has_permission',
    'require_permission',
    'describe_access',
    'menu_for',
    'EmployeeStore',
    'seed_employees',
    'Session',
    'EmployeeDirectory',
]
