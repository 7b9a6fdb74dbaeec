"""
Tests for the in-memory record store: uniqueness, linear lookups,
case-sensitive substring search, modify and delete guards.
"""

from decimal import Decimal

import pytest

from employee_directory.core.exceptions import (
    DuplicateEmployeeError,
    EmployeeNotFoundError,
    SelfDeleteError,
)
from employee_directory.core.models import Employee, Role
from employee_directory.core.store import EmployeeStore, seed_employees


def test_seeded_store_has_five_known_ids(store):
    assert [e.user_id for e in store] == [1001, 2001, 3001, 3002, 3003]
    assert len(store) == 5


def test_seed_roles(store):
    assert store.find_by_id(1001).role is Role.HR
    assert store.find_by_id(2001).role is Role.MANAGEMENT
    assert store.find_by_id(3003).role is Role.GENERAL


def test_seed_employees_returns_fresh_records():
    first = seed_employees()
    first[0].name = "Changed"
    assert seed_employees()[0].name == "Sarah Johnson"


def test_add_appends_in_order(store):
    new = Employee("Lena Park", 4001, "Sales", "Account Executive", Decimal("48000"), Role.GENERAL)
    store.add(new)
    assert store.all()[-1] is new
    assert store.exists(4001)


def test_add_duplicate_id_rejected(store):
    duplicate = Employee("Impostor", 1001, "IT", "Admin", Decimal("1"), Role.HR)
    with pytest.raises(DuplicateEmployeeError) as exc_info:
        store.add(duplicate)
    assert exc_info.value.user_id == 1001
    assert len(store) == 5
    assert store.find_by_id(1001).name == "Sarah Johnson"


def test_constructor_rejects_duplicate_ids():
    records = [
        Employee("A", 1, "X", "Y", Decimal("1")),
        Employee("B", 1, "X", "Y", Decimal("1")),
    ]
    with pytest.raises(DuplicateEmployeeError):
        EmployeeStore(records)


def test_find_by_id_missing_returns_none(store):
    assert store.find_by_id(9999) is None


class TestSubstringSearch:

    def test_name_search_returns_all_matches(self, store):
        matches = store.find_by_name("John")
        assert [e.user_id for e in matches] == [1001, 3001]

    def test_name_search_is_case_sensitive(self, store):
        assert store.find_by_name("john") == []

    def test_department_search(self, store):
        matches = store.find_by_department("Human")
        assert [e.user_id for e in matches] == [1001]

    def test_department_search_case_sensitive(self, store):
        assert store.find_by_department("it") == []
        assert [e.user_id for e in store.find_by_department("IT")] == [3001]

    def test_zero_matches(self, store):
        assert store.find_by_department("Legal") == []

    def test_empty_text_matches_everything(self, store):
        assert len(store.find_by_name("")) == 5


class TestModify:

    def test_modify_text_field(self, store):
        updated = store.modify(3002, 'department', 'Brand')
        assert updated.department == 'Brand'
        assert store.find_by_id(3002).department == 'Brand'

    def test_modify_salary_converts_to_decimal(self, store):
        store.modify(3003, 'salary', '61000.50')
        assert store.find_by_id(3003).salary == Decimal('61000.50')

    def test_modify_negative_salary_rejected(self, store):
        with pytest.raises(ValueError):
            store.modify(3003, 'salary', '-1')
        assert store.find_by_id(3003).salary == Decimal('60000')

    def test_modify_salary_too_large_rejected(self, store):
        with pytest.raises(ValueError, match="too large"):
            store.modify(3003, 'salary', '1E+26')
        assert store.find_by_id(3003).salary == Decimal('60000')

    @pytest.mark.parametrize("field", ['user_id', 'role', 'email'])
    def test_modify_fixed_or_unknown_field_rejected(self, store, field):
        with pytest.raises(ValueError):
            store.modify(3001, field, 'x')

    def test_modify_missing_record(self, store):
        with pytest.raises(EmployeeNotFoundError, match="9999"):
            store.modify(9999, 'name', 'Ghost')


class TestDelete:

    def test_delete_removes_first_match(self, store):
        removed = store.delete(3001, current_user_id=1001)
        assert removed.name == "John Smith"
        assert not store.exists(3001)
        assert len(store) == 4

    def test_delete_own_record_rejected(self, store):
        with pytest.raises(SelfDeleteError):
            store.delete(1001, current_user_id=1001)
        assert store.exists(1001)

    def test_delete_missing_record(self, store):
        with pytest.raises(EmployeeNotFoundError):
            store.delete(9999, current_user_id=1001)


class TestEmployeeRecord:

    def test_negative_salary_rejected_on_create(self):
        with pytest.raises(ValueError):
            Employee("Neg", 5, "X", "Y", Decimal("-0.01"))

    def test_non_integer_id_rejected(self):
        with pytest.raises(ValueError):
            Employee("Bad", "5", "X", "Y", Decimal("1"))

    def test_role_label_coerced(self):
        employee = Employee("Lab", 6, "X", "Y", "10", "Management")
        assert employee.role is Role.MANAGEMENT
        assert employee.salary == Decimal("10")
