"""
Record Store Module

Ordered, in-memory container of employee records. Lookups are linear
scans in insertion order; searches are case-sensitive substring matches.

The store owns its records exclusively and lives for the process
lifetime. Nothing is persisted.
"""

import logging
from typing import Iterator, List, Optional

from employee_directory.core.exceptions import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    SelfDeleteError,
)
from employee_directory.core.models import Employee, Role, validate_salary
from employee_directory.utils.constants import MODIFIABLE_FIELDS, SEED_EMPLOYEES, TEXT_FIELDS

logger = logging.getLogger("employee_directory")


def seed_employees() -> List[Employee]:
    """Build fresh copies of the records every run starts with."""
    return [
        Employee(name, user_id, department, position, salary, Role.from_label(role))
        for name, user_id, department, position, salary, role in SEED_EMPLOYEES
    ]


class EmployeeStore:
    """Employee records in insertion order"""

    def __init__(self, employees=None):
        self._employees: List[Employee] = []
        for employee in employees or []:
            self.add(employee)

    @classmethod
    def seeded(cls) -> "EmployeeStore":
        return cls(seed_employees())

    def __len__(self) -> int:
        return len(self._employees)

    def __iter__(self) -> Iterator[Employee]:
        return iter(self._employees)

    def all(self) -> List[Employee]:
        return list(self._employees)

    def exists(self, user_id: int) -> bool:
        return self.find_by_id(user_id) is not None

    def add(self, employee: Employee) -> Employee:
        """Append a record; the user_id must not already be present."""
        if self.exists(employee.user_id):
            raise DuplicateEmployeeError(employee.user_id)
        self._employees.append(employee)
        logger.info(f"Added employee {employee.user_id} ({employee.role_label})")
        return employee

    def find_by_id(self, user_id: int) -> Optional[Employee]:
        for employee in self._employees:
            if employee.user_id == user_id:
                return employee
        return None

    def find_by_name(self, text: str) -> List[Employee]:
        return [e for e in self._employees if text in e.name]

    def find_by_department(self, text: str) -> List[Employee]:
        return [e for e in self._employees if text in e.department]

    def get(self, user_id: int) -> Employee:
        """Like find_by_id, but raises EmployeeNotFoundError when absent."""
        employee = self.find_by_id(user_id)
        if employee is None:
            raise EmployeeNotFoundError(user_id)
        return employee

    def modify(self, user_id: int, field: str, value) -> Employee:
        """
        Change one mutable field of a record.

        Args:
            user_id: Record to change
            field: One of name, department, position, salary
            value: New value (salary must be a non-negative number)

        Returns:
            The updated record

        Raises:
            EmployeeNotFoundError: No record has user_id
            ValueError: field is not modifiable or salary is invalid
        """
        if field not in MODIFIABLE_FIELDS:
            raise ValueError(f"Field '{field}' cannot be modified")
        employee = self.get(user_id)

        if field in TEXT_FIELDS:
            new_value = str(value)
        else:
            new_value = validate_salary(value)

        old_value = getattr(employee, field)
        setattr(employee, field, new_value)
        logger.info(f"Modified employee {user_id}: {field} changed")
        logger.debug(f"Employee {user_id} {field}: {old_value!r} -> {new_value!r}")
        return employee

    def delete(self, user_id: int, current_user_id: Optional[int] = None) -> Employee:
        """
        Remove the first record matching user_id.

        Raises:
            SelfDeleteError: user_id belongs to the logged-in user
            EmployeeNotFoundError: No record has user_id
        """
        if current_user_id is not None and user_id == current_user_id:
            raise SelfDeleteError(user_id)
        for index, employee in enumerate(self._employees):
            if employee.user_id == user_id:
                del self._employees[index]
                logger.info(f"Deleted employee {user_id}")
                return employee
        raise EmployeeNotFoundError(user_id)
