"""
Record Model Module

Defines the employee record and the two enums the access policy is built on:
- Role: HR, Management or General (fixed at creation)
- Permission: the operations a role may be granted
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from employee_directory.decimal_utils import is_representable, to_decimal


# ==========================================
# ROLES & PERMISSIONS
# ==========================================

class Role(Enum):
    """Access tiers. Values are the labels shown on screen."""
    HR = "HR"
    MANAGEMENT = "Management"
    GENERAL = "General"

    @classmethod
    def from_label(cls, label: str) -> "Role":
        """Look up a role by its label, case-insensitively."""
        text = str(label).strip().lower()
        for role in cls:
            if role.value.lower() == text or role.name.lower() == text:
                return role
        raise ValueError(f"Unknown role: {label!r}")


class Permission(Enum):
    """Operations gated by the access policy"""
    ADD = "add"
    VIEW_ALL = "view_all"
    VIEW_OWN = "view_own"
    SEARCH = "search"
    MODIFY = "modify"
    DELETE = "delete"


# ==========================================
# EMPLOYEE RECORD
# ==========================================

@dataclass
class Employee:
    name: str
    user_id: int
    department: str
    position: str
    salary: Decimal = field(default=Decimal('0'))
    role: Role = field(default=Role.GENERAL)

    def __post_init__(self):
        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int):
            raise ValueError(f"user_id must be an integer, got {self.user_id!r}")
        if not isinstance(self.role, Role):
            self.role = Role.from_label(self.role)
        self.salary = validate_salary(self.salary)

    @property
    def role_label(self) -> str:
        return self.role.value

    def to_row(self) -> dict:
        """Flatten the record for tabular display."""
        return {
            'User ID': self.user_id,
            'Name': self.name,
            'Department': self.department,
            'Position': self.position,
            'Salary': self.salary,
            'User Type': self.role_label,
        }


def validate_salary(value) -> Decimal:
    """Coerce a salary to Decimal, rejecting negatives and non-numbers."""
    sentinel = Decimal('-1')
    amount = to_decimal(value, sentinel)
    if amount is sentinel:
        raise ValueError(f"Salary must be a number, got {value!r}")
    if amount < 0:
        raise ValueError("Salary cannot be negative.")
    if not is_representable(amount):
        raise ValueError("Salary is too large.")
    return amount
