"""
Session Module

Holds the single logged-in user. There are no passwords, lockouts or
attempt limits: knowing a valid user_id is enough to log in.
"""

import logging
from typing import Optional

from employee_directory.core.exceptions import NotLoggedInError
from employee_directory.core.models import Employee

logger = logging.getLogger("employee_directory")


class Session:
    """Exactly one or no current user"""

    def __init__(self):
        self._current_user: Optional[Employee] = None

    @property
    def current_user(self) -> Optional[Employee]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def login(self, store, user_id: int) -> Optional[Employee]:
        """
        Look up user_id in the store and make it the current user.

        Returns:
            The matching record, or None (session left unchanged) when
            no record has that id
        """
        employee = store.find_by_id(user_id)
        if employee is None:
            logger.info(f"Login failed for unknown user id {user_id}")
            return None
        self._current_user = employee
        logger.info(f"Login succeeded for user {user_id} ({employee.role_label})")
        return employee

    def logout(self) -> None:
        if self._current_user is not None:
            logger.info(f"User {self._current_user.user_id} logged out")
        self._current_user = None

    def require_user(self) -> Employee:
        if self._current_user is None:
            raise NotLoggedInError()
        return self._current_user
