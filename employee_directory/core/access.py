"""
Access Policy Module

Static role -> permission lookup. There is no state machine: a role's
permission set never changes at runtime.

    HR          add, view-all, search, modify, delete
    Management  view-all, search
    General     view-own
"""

from typing import FrozenSet, List, NamedTuple

from employee_directory.core.exceptions import PermissionDeniedError
from employee_directory.core.models import Permission, Role


# ==========================================
# ROLE PERMISSIONS MAPPING
# ==========================================

_ROLE_PERMISSIONS = {
    Role.HR: frozenset({
        Permission.ADD,
        Permission.VIEW_ALL,
        Permission.VIEW_OWN,
        Permission.SEARCH,
        Permission.MODIFY,
        Permission.DELETE,
    }),
    Role.MANAGEMENT: frozenset({
        Permission.VIEW_ALL,
        Permission.VIEW_OWN,
        Permission.SEARCH,
    }),
    Role.GENERAL: frozenset({
        Permission.VIEW_OWN,
    }),
}

_ROLE_DESCRIPTIONS = {
    Role.HR: "Full Access: Add, View, Search, Modify, Delete employees",
    Role.MANAGEMENT: "Limited Access: Search and View employees only",
    Role.GENERAL: "Restricted Access: View own information only",
}

_DENIED_MESSAGES = {
    Permission.ADD: "Access denied. Only HR can add employees.",
    Permission.MODIFY: "Access denied. Only HR can modify employee information.",
    Permission.DELETE: "Access denied. Only HR can delete employees.",
    Permission.SEARCH: "Access denied. General employees can only view their own information.",
    Permission.VIEW_ALL: "Access denied. General employees can only view their own information.",
    Permission.VIEW_OWN: "Access denied.",
}


class MenuEntry(NamedTuple):
    label: str
    action: str


_ROLE_MENUS = {
    Role.HR: [
        MenuEntry("Add Employee", "add"),
        MenuEntry("View All Employees", "view"),
        MenuEntry("Search Employees", "search"),
        MenuEntry("Modify Employee", "modify"),
        MenuEntry("Delete Employee", "delete"),
    ],
    Role.MANAGEMENT: [
        MenuEntry("View All Employees", "view"),
        MenuEntry("Search Employees", "search"),
    ],
    Role.GENERAL: [
        MenuEntry("View My Information", "view"),
    ],
}

LOGOUT_ENTRY = MenuEntry("Logout", "logout")


# ==========================================
# POLICY FUNCTIONS
# ==========================================

def get_role_permissions(role: Role) -> FrozenSet[Permission]:
    """
    Get the permissions for a role.

    Args:
        role: The role to get permissions for.

    Returns:
        FrozenSet of Permission values.
    """
    return _ROLE_PERMISSIONS[role]


def has_permission(role: Role, permission: Permission) -> bool:
    return permission in _ROLE_PERMISSIONS.get(role, frozenset())


def require_permission(role: Role, permission: Permission) -> None:
    """Raise PermissionDeniedError unless role grants permission."""
    if not has_permission(role, permission):
        raise PermissionDeniedError(_DENIED_MESSAGES[permission])


def describe_access(role: Role) -> str:
    return _ROLE_DESCRIPTIONS[role]


def menu_for(role: Role) -> List[MenuEntry]:
    """Numbered main-menu entries for a role; Logout is always last."""
    return list(_ROLE_MENUS[role]) + [LOGOUT_ENTRY]
