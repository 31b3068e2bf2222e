from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import require_fields, require_non_empty, require_non_negative
from ..core.enums import EmployeeStatus
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..core.logging import get_logger
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository

logger = get_logger(__name__)

_UPDATE_FIELDS = (
    "fullName",
    "phone",
    "branch",
    "status",
    "daily_rate",
    "bonus",
    "compensation",
    "employee_type",
)


class EmployeeService:
    """Use cases: registration and admin maintenance of employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def register(self, *, user_id: str, full_name: str, phone: str, branch: str) -> int:
        require_fields(
            {"userId": user_id, "fullName": full_name, "phone": phone, "branch": branch},
            "userId",
            "fullName",
            "phone",
            "branch",
        )
        user_id = require_non_empty(user_id, "userId")

        if self._employees.get_by_user_id(user_id):
            raise ConflictError("User is already registered.")

        # The branch is not checked against stores here; that happens at clock time.
        employee_id = self._employees.create(
            user_id=user_id,
            full_name=require_non_empty(full_name, "fullName"),
            phone=require_non_empty(phone, "phone"),
            branch=require_non_empty(branch, "branch"),
        )
        logger.info("Registered employee user_id=%s id=%s (pending approval)", user_id, employee_id)
        return employee_id

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_by_user_id(self, user_id: str) -> Employee:
        employee = self._employees.get_by_user_id(str(user_id))
        if not employee:
            raise NotFoundError("User not found.")
        return employee

    def update(self, employee_id: int, payload: Mapping[str, Any]) -> None:
        require_fields(payload, *_UPDATE_FIELDS)

        try:
            status = EmployeeStatus(str(payload["status"]).strip().lower())
        except ValueError:
            allowed = ", ".join(s.value for s in EmployeeStatus)
            raise ValidationError(f"status must be one of: {allowed}")

        changes = EmployeeUpdate(
            full_name=require_non_empty(payload["fullName"], "fullName"),
            phone=require_non_empty(payload["phone"], "phone"),
            branch=require_non_empty(payload["branch"], "branch"),
            status=status,
            daily_rate=require_non_negative(payload["daily_rate"], "daily_rate"),
            bonus=require_non_negative(payload["bonus"], "bonus"),
            compensation=require_non_negative(payload["compensation"], "compensation"),
            employee_type=require_non_empty(payload["employee_type"], "employee_type"),
        )

        if not self._employees.update(int(employee_id), changes):
            raise NotFoundError("Employee not found.")
        logger.info("Updated employee id=%s status=%s", employee_id, status.value)

    def delete(self, employee_id: int) -> None:
        if not self._employees.delete_with_sessions(int(employee_id)):
            raise NotFoundError("Employee not found.")
        logger.info("Deleted employee id=%s and their sessions", employee_id)

    def list_branches(self) -> Sequence[str]:
        return self._employees.list_branches()


def employee_to_dict(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "userId": e.user_id,
        "fullName": e.full_name,
        "phone": e.phone,
        "branch": e.branch,
        "status": e.status.value,
        "daily_rate": float(e.daily_rate) if e.daily_rate is not None else None,
        "bonus": float(e.bonus) if e.bonus is not None else None,
        "compensation": float(e.compensation) if e.compensation is not None else None,
        "employee_type": e.employee_type,
    }
