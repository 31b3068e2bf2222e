from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Approval state of a registered employee."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    INACTIVE = "inactive"


class ClockAction(str, Enum):
    """What a clock event did to the employee's session."""

    OPENED = "opened"
    CLOSED = "closed"


class AdminRole(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
