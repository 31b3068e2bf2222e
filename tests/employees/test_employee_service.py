from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from src.timeclock_payroll.timeclock_payroll.core.enums import EmployeeStatus
from src.timeclock_payroll.timeclock_payroll.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.timeclock_payroll.timeclock_payroll.employees.service import EmployeeService

UPDATE = {
    "fullName": "Alice Smith",
    "phone": "0811111111",
    "branch": "Central",
    "status": "approved",
    "daily_rate": 100,
    "bonus": "50",
    "compensation": 0,
    "employee_type": "full_time",
}


@pytest.fixture
def service(employees_repo):
    return EmployeeService(employees_repo)


def test_register_starts_pending(service, employees_repo):
    employee_id = service.register(user_id="U1", full_name="Alice", phone="0800", branch="Nowhere")

    emp = employees_repo.get_by_id(employee_id)
    assert emp.status == EmployeeStatus.PENDING
    assert emp.branch == "Nowhere"


def test_register_rejects_duplicates_and_missing_fields(service):
    service.register(user_id="U1", full_name="Alice", phone="0800", branch="Central")

    with pytest.raises(ConflictError):
        service.register(user_id="U1", full_name="Again", phone="0800", branch="Central")
    with pytest.raises(ValidationError):
        service.register(user_id="U2", full_name="", phone="0800", branch="Central")


def test_update_sets_pay_fields(service, employees_repo):
    emp = employees_repo.add("U1", status=EmployeeStatus.PENDING)

    service.update(emp.employee_id, UPDATE)

    updated = employees_repo.get_by_id(emp.employee_id)
    assert updated.is_approved
    assert updated.daily_rate == Decimal("100")
    assert updated.bonus == Decimal("50")
    assert updated.compensation == Decimal("0")
    assert updated.employee_type == "full_time"


@pytest.mark.parametrize(
    "override",
    [{"status": "on_vacation"}, {"daily_rate": -1}, {"bonus": "lots"}, {"employee_type": ""}],
)
def test_update_validation(service, employees_repo, override):
    emp = employees_repo.add("U1")
    with pytest.raises(ValidationError):
        service.update(emp.employee_id, {**UPDATE, **override})


def test_update_unknown_employee(service):
    with pytest.raises(NotFoundError):
        service.update(99, UPDATE)


def test_delete_removes_sessions(service, employees_repo, sessions_repo):
    emp = employees_repo.add("U1")
    sessions_repo.add_closed("U1", datetime(2026, 3, 2, 8, 0), 9)

    service.delete(emp.employee_id)

    assert employees_repo.get_by_id(emp.employee_id) is None
    assert sessions_repo.list_for_user("U1") == []
    with pytest.raises(NotFoundError):
        service.delete(emp.employee_id)


def test_get_by_user_id(service, employees_repo):
    employees_repo.add("U1")
    assert service.get_by_user_id("U1").user_id == "U1"
    with pytest.raises(NotFoundError):
        service.get_by_user_id("U2")
