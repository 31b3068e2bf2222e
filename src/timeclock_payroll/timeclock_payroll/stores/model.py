from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Store:
    store_id: int
    name: str
    latitude: Decimal
    longitude: Decimal


@dataclass(frozen=True)
class BranchMatch:
    """Result of resolving an employee's branch name to a store.

    A miss carries no store; an ambiguous hit means several stores share the
    name and the one with the lowest id was chosen.
    """

    branch: str
    store: Optional[Store]
    ambiguous: bool = False

    @property
    def found(self) -> bool:
        return self.store is not None
