from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeUpdate


class EmployeeRepository(Protocol):
    """Employee directory.

    Services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by internal id."""

        raise NotImplementedError

    def create(self, *, user_id: str, full_name: str, phone: str, branch: str) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, changes: EmployeeUpdate) -> bool:
        raise NotImplementedError

    def delete_with_sessions(self, employee_id: int) -> bool:
        raise NotImplementedError

    def list_branches(self) -> Sequence[str]:
        raise NotImplementedError
