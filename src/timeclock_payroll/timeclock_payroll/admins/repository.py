from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import AdminRole
from .model import Admin


class AdminRepository(Protocol):
    def get_by_username(self, username: str) -> Optional[Admin]:
        raise NotImplementedError

    def create(self, *, username: str, password_hash: str, role: AdminRole) -> int:
        raise NotImplementedError
