"""
Directory Service Module

Operations a logged-in user performs against the record store. Each call
checks the session's role against the access policy before touching the
store; denied calls raise PermissionDeniedError and change nothing.
"""

import logging
from typing import List, Optional

from employee_directory.core.access import has_permission, require_permission
from employee_directory.core.exceptions import PermissionDeniedError, SelfDeleteError
from employee_directory.core.models import Employee, Permission, Role
from employee_directory.core.session import Session
from employee_directory.core.store import EmployeeStore

logger = logging.getLogger("employee_directory")


class EmployeeDirectory:
    """Role-gated add / view / search / modify / delete"""

    def __init__(self, store: EmployeeStore, session: Optional[Session] = None):
        if store is None:
            raise ValueError("store cannot be None")
        self.store = store
        self.session = session or Session()

    # ------------------------------------------------------------------
    # Session helpers
    # ------------------------------------------------------------------

    def login(self, user_id: int) -> Optional[Employee]:
        return self.session.login(self.store, user_id)

    def logout(self) -> None:
        self.session.logout()

    def authorize(self, permission: Permission) -> Employee:
        user = self.session.require_user()
        try:
            require_permission(user.role, permission)
        except PermissionDeniedError:
            logger.info(
                f"User {user.user_id} ({user.role_label}) denied {permission.value}"
            )
            raise
        return user

    def can(self, permission: Permission) -> bool:
        user = self.session.current_user
        return user is not None and has_permission(user.role, permission)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add_employee(self, name: str, user_id: int, department: str, position: str,
                     salary, role: Role = Role.GENERAL) -> Employee:
        self.authorize(Permission.ADD)
        employee = Employee(name, user_id, department, position, salary, role)
        return self.store.add(employee)

    def view_employees(self) -> List[Employee]:
        """All records for HR/Management; only the caller's own for General."""
        user = self.session.require_user()
        if has_permission(user.role, Permission.VIEW_ALL):
            return self.store.all()
        self.authorize(Permission.VIEW_OWN)
        return [user]

    def search_by_id(self, user_id: int) -> Optional[Employee]:
        self.authorize(Permission.SEARCH)
        return self.store.find_by_id(user_id)

    def search_by_name(self, text: str) -> List[Employee]:
        self.authorize(Permission.SEARCH)
        return self.store.find_by_name(text)

    def search_by_department(self, text: str) -> List[Employee]:
        self.authorize(Permission.SEARCH)
        return self.store.find_by_department(text)

    def get_for_modify(self, user_id: int) -> Employee:
        """Fetch a record HR is about to change (raises if absent)."""
        self.authorize(Permission.MODIFY)
        return self.store.get(user_id)

    def modify_employee(self, user_id: int, field: str, value) -> Employee:
        self.authorize(Permission.MODIFY)
        return self.store.modify(user_id, field, value)

    def get_for_delete(self, user_id: int) -> Employee:
        """Fetch a record HR is about to delete, applying the self-delete guard first."""
        user = self.authorize(Permission.DELETE)
        if user_id == user.user_id:
            raise SelfDeleteError(user_id)
        return self.store.get(user_id)

    def delete_employee(self, user_id: int) -> Employee:
        user = self.authorize(Permission.DELETE)
        return self.store.delete(user_id, current_user_id=user.user_id)
