"""
================================================================================
CONSOLE - Interactive Role-Based Menu
================================================================================

Guided console workflow over the employee directory.

Workflow:
    1. Banner with the seeded login credentials
    2. Login by user ID (retry on request)
    3. Role-specific numbered menu until Logout

Menus:
    HR          Add, View All, Search, Modify, Delete, Logout
    Management  View All, Search, Logout
    General     View My Information, Logout

Interactive Features:
    - Input loops re-prompt on non-numeric or negative numbers
    - Duplicate IDs re-prompted while adding
    - Preview of the record before modify/delete
    - y/n confirmation before deletion
    - Tabular listing (pandas) for view-all and search results

Usage:
    python cli.py run

Author: robertbiv
Last Modified: October 2026
================================================================================
"""

import logging
from typing import Callable, Iterable, List, Optional

import pandas as pd

from employee_directory.core.access import describe_access, menu_for
from employee_directory.core.directory import EmployeeDirectory
from employee_directory.core.exceptions import DirectoryError
from employee_directory.core.models import Employee, Permission, Role
from employee_directory.core.store import EmployeeStore
from employee_directory.decimal_utils import format_currency, parse_amount
from employee_directory.utils.config import DEFAULT_CONFIG, get_setting
from employee_directory.utils.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    DIVIDER_WIDTH,
    SEED_EMPLOYEES,
    YES_ANSWERS,
)

logger = logging.getLogger("employee_directory")


# ANSI color codes
class Colors:
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


ROLE_CHOICES = {1: Role.HR, 2: Role.MANAGEMENT, 3: Role.GENERAL}
MODIFY_CHOICES = {1: 'name', 2: 'department', 3: 'position', 4: 'salary'}


def render_table(employees: Iterable[Employee], currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Render records as a fixed-width table."""
    rows = [e.to_row() for e in employees]
    if not rows:
        return ""
    df = pd.DataFrame(rows)
    df['Salary'] = df['Salary'].map(lambda v: format_currency(v, currency_symbol))
    return df.to_string(index=False)


class EmployeeConsole:
    """Interactive menu loop bound to one directory"""

    def __init__(self, directory: EmployeeDirectory, config: Optional[dict] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 output_func: Callable[[str], None] = print):
        self.directory = directory
        self.config = config or DEFAULT_CONFIG
        self._read = input_func
        self._write = output_func
        self.color = bool(get_setting(self.config, 'display', 'color', True))
        self.currency_symbol = get_setting(self.config, 'display', 'currency_symbol', DEFAULT_CURRENCY_SYMBOL)
        self.table_view = bool(get_setting(self.config, 'display', 'table_view', True))

    @classmethod
    def with_seed_data(cls, config: Optional[dict] = None, **kwargs) -> "EmployeeConsole":
        seed = get_setting(config or DEFAULT_CONFIG, 'directory', 'seed_on_start', True)
        store = EmployeeStore.seeded() if seed else EmployeeStore()
        return cls(EmployeeDirectory(store), config, **kwargs)

    # ------------------------------------------------------------------
    # Output helpers
    # ------------------------------------------------------------------

    def _print(self, message: str = "") -> None:
        self._write(message)

    def _paint(self, text: str, *codes: str) -> str:
        if not self.color:
            return text
        return f"{''.join(codes)}{text}{Colors.ENDC}"

    def _header(self, text: str) -> None:
        self._print(self._paint(f"\n=== {text} ===", Colors.BOLD, Colors.CYAN))

    def _success(self, text: str) -> None:
        self._print(self._paint(text, Colors.GREEN))

    def _error(self, text: str) -> None:
        self._print(self._paint(text, Colors.RED))

    def _divider(self, char: str = '-') -> None:
        self._print(char * DIVIDER_WIDTH)

    # ------------------------------------------------------------------
    # Input helpers
    # ------------------------------------------------------------------

    def _input(self, prompt: str) -> str:
        reader = self._read or input
        return reader(prompt)

    def get_valid_integer(self, prompt: str) -> int:
        """Prompt until the user enters a non-negative whole number."""
        while True:
            raw = self._input(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                self._error("Invalid input. Please enter a number.")
                continue
            if value < 0:
                self._error("Invalid input. Please enter a positive number.")
                continue
            return value

    def get_valid_amount(self, prompt: str):
        """Prompt until the user enters a non-negative amount."""
        while True:
            amount = parse_amount(self._input(prompt))
            if amount is None:
                self._error("Invalid input. Please enter a positive number.")
                continue
            return amount

    def get_string(self, prompt: str) -> str:
        return self._input(prompt)

    def confirm(self, prompt: str) -> bool:
        # first non-blank character decides, so "yes" confirms
        return self._input(prompt).strip()[:1] in YES_ANSWERS

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def display_employee(self, employee: Employee) -> None:
        self._print("\n--- Employee Information ---")
        self._print(f"Name: {employee.name}")
        self._print(f"User ID: {employee.user_id}")
        self._print(f"Department: {employee.department}")
        self._print(f"Position: {employee.position}")
        self._print(f"Salary: {format_currency(employee.salary, self.currency_symbol)}")
        self._print(f"User Type: {employee.role_label}")
        self._print(f"Permissions: {describe_access(employee.role)}")

    def display_employees(self, employees: List[Employee]) -> None:
        if self.table_view:
            self._print()
            self._print(render_table(employees, self.currency_symbol))
            return
        for index, employee in enumerate(employees, 1):
            self._print(f"\n--- Employee {index} ---")
            self.display_employee(employee)
            self._divider()

    def show_banner(self) -> None:
        self._print(self._paint("Welcome to the Employee Management Information System!", Colors.BOLD))
        self._print("\nDefault Login Credentials for Testing:")
        for line in credential_lines():
            self._print(line)

    def display_menu(self) -> list:
        user = self.directory.session.require_user()
        entries = menu_for(user.role)
        self._header("Main Menu")
        self._print(f"Logged in as: {user.name} ({user.role_label})")
        self._divider('=')
        for number, entry in enumerate(entries, 1):
            self._print(f"{number}. {entry.label}")
        return entries

    # ------------------------------------------------------------------
    # Workflow
    # ------------------------------------------------------------------

    def login(self) -> bool:
        self._header("Employee Management System Login")
        user_id = self.get_valid_integer("Enter your User ID: ")
        employee = self.directory.login(user_id)
        if employee is None:
            self._error("Invalid User ID. Access denied.")
            return False
        self._success(f"\nLogin successful! Welcome, {employee.name}")
        self._print(f"User Type: {employee.role_label}")
        return True

    def run(self) -> int:
        """Run login + menu loop. Returns a process exit code."""
        logger.info(f"Console session started with {len(self.directory.store)} records")
        self.show_banner()

        while not self.login():
            if not self.confirm("Would you like to try again? (y/n): "):
                self._print("Goodbye!")
                return 0

        while True:
            entries = self.display_menu()
            choice = self.get_valid_integer(f"Enter your choice (1-{len(entries)}): ")
            if not 1 <= choice <= len(entries):
                self._error("Invalid choice. Please try again.")
            else:
                action = entries[choice - 1].action
                if action == 'logout':
                    self.directory.logout()
                    self._print("Logging out... Goodbye!")
                    return 0
                self.dispatch(action)

            self._input("\nPress Enter to continue...")

    def dispatch(self, action: str) -> None:
        handlers = {
            'add': self.add_employee,
            'view': self.view_employees,
            'search': self.search_employees,
            'modify': self.modify_employee,
            'delete': self.delete_employee,
        }
        try:
            handlers[action]()
        except DirectoryError as e:
            self._error(str(e))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add_employee(self) -> None:
        self.directory.authorize(Permission.ADD)
        self._header("Add New Employee")
        name = self.get_string("Enter employee name: ")

        while True:
            user_id = self.get_valid_integer("Enter unique User ID: ")
            if not self.directory.store.exists(user_id):
                break
            self._error("User ID already exists. Please choose a different ID.")

        department = self.get_string("Enter department: ")
        position = self.get_string("Enter position: ")
        salary = self.get_valid_amount(f"Enter salary: {self.currency_symbol}")

        self._print("\nSelect employee type:")
        self._print("1. HR Employee")
        self._print("2. Management Employee")
        self._print("3. General Employee")
        choice = self.get_valid_integer("Enter choice (1-3): ")
        role = ROLE_CHOICES.get(choice)
        if role is None:
            self._print("Invalid choice. Creating as General Employee.")
            role = Role.GENERAL

        self.directory.add_employee(name, user_id, department, position, salary, role)
        self._success("\nEmployee added successfully!")

    def view_employees(self) -> None:
        user = self.directory.session.require_user()
        employees = self.directory.view_employees()
        if not self.directory.can(Permission.VIEW_ALL):
            self._header("Your Employee Information")
            self.display_employee(user)
            return
        self._header("All Employees")
        if not employees:
            self._print("No employees found.")
            return
        self.display_employees(employees)

    def search_employees(self) -> None:
        self.directory.authorize(Permission.SEARCH)
        self._header("Search Employees")
        self._print("1. Search by User ID")
        self._print("2. Search by Name")
        self._print("3. Search by Department")
        choice = self.get_valid_integer("Enter search option (1-3): ")

        if choice == 1:
            search_id = self.get_valid_integer("Enter User ID to search: ")
            employee = self.directory.search_by_id(search_id)
            if employee is None:
                self._print(f"No employee found with User ID: {search_id}")
                return
            self._print("\n--- Search Result ---")
            self.display_employee(employee)
        elif choice == 2:
            text = self.get_string("Enter name to search: ")
            matches = self.directory.search_by_name(text)
            if not matches:
                self._print(f"No employee found with name containing: {text}")
                return
            self._print(f"\n--- Search Results ({len(matches)}) ---")
            self.display_employees(matches)
        elif choice == 3:
            text = self.get_string("Enter department to search: ")
            matches = self.directory.search_by_department(text)
            if not matches:
                self._print(f"No employee found in department: {text}")
                return
            self._print(f"\n--- Search Results ({len(matches)}) ---")
            self.display_employees(matches)
        else:
            self._error("Invalid search option.")

    def modify_employee(self) -> None:
        self.directory.authorize(Permission.MODIFY)
        self._header("Modify Employee")
        user_id = self.get_valid_integer("Enter User ID of employee to modify: ")
        employee = self.directory.get_for_modify(user_id)

        self._print("\nCurrent employee information:")
        self.display_employee(employee)

        self._print("\nWhat would you like to modify?")
        self._print("1. Name")
        self._print("2. Department")
        self._print("3. Position")
        self._print("4. Salary")
        choice = self.get_valid_integer("Enter choice (1-4): ")
        field = MODIFY_CHOICES.get(choice)
        if field is None:
            self._error("Invalid choice.")
            return

        if field == 'salary':
            value = self.get_valid_amount(f"Enter new salary: {self.currency_symbol}")
        else:
            value = self.get_string(f"Enter new {field}: ")

        self.directory.modify_employee(user_id, field, value)
        self._success(f"{field.capitalize()} updated successfully!")

    def delete_employee(self) -> None:
        self.directory.authorize(Permission.DELETE)
        self._header("Delete Employee")
        user_id = self.get_valid_integer("Enter User ID of employee to delete: ")
        employee = self.directory.get_for_delete(user_id)

        self._print("\nEmployee to be deleted:")
        self.display_employee(employee)

        if self.confirm("\nAre you sure you want to delete this employee? (y/n): "):
            self.directory.delete_employee(user_id)
            self._success("Employee deleted successfully!")
        else:
            self._print("Deletion cancelled.")


def credential_lines() -> List[str]:
    """Login hints for the seeded accounts, grouped by role."""
    by_role = {}
    for name, user_id, _dept, _pos, _salary, role in SEED_EMPLOYEES:
        by_role.setdefault(role, []).append(f"{user_id} ({name})")
    labels = {'HR': "HR User", 'Management': "Management User", 'General': "General Employee"}
    return [f"{labels.get(role, role)}: {', '.join(entries)}" for role, entries in by_role.items()]
