from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AdminRole


@dataclass(frozen=True)
class Admin:
    admin_id: int
    username: str
    password_hash: str
    role: AdminRole


@dataclass(frozen=True)
class AdminIdentity:
    """What a verified bearer token tells us about the caller."""

    admin_id: int
    role: AdminRole
