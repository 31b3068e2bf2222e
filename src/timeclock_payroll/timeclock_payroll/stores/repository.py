from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Store


class StoreRepository(Protocol):
    def list_all(self) -> Sequence[Store]:
        raise NotImplementedError

    def get_by_id(self, store_id: int) -> Optional[Store]:
        raise NotImplementedError

    def find_by_name(self, name: str) -> Sequence[Store]:
        """Stores whose name equals `name` exactly, ordered by id."""

        raise NotImplementedError

    def create(self, *, name: str, latitude: Decimal, longitude: Decimal) -> int:
        raise NotImplementedError

    def update(self, store_id: int, *, name: str, latitude: Decimal, longitude: Decimal) -> bool:
        raise NotImplementedError

    def delete(self, store_id: int) -> bool:
        raise NotImplementedError
