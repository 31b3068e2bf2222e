from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import require_coordinate, require_fields, require_non_empty
from ..core.exceptions import NotFoundError
from ..core.logging import get_logger
from .model import BranchMatch, Store
from .repository import StoreRepository

logger = get_logger(__name__)


class StoreService:
    def __init__(self, stores: StoreRepository):
        self._stores = stores

    def list_all(self) -> Sequence[Store]:
        return self._stores.list_all()

    def create(self, payload: Mapping[str, Any]) -> int:
        name, latitude, longitude = self._parse(payload)
        store_id = self._stores.create(name=name, latitude=latitude, longitude=longitude)
        logger.info("Created store id=%s name=%r", store_id, name)
        return store_id

    def update(self, store_id: int, payload: Mapping[str, Any]) -> None:
        name, latitude, longitude = self._parse(payload)
        if not self._stores.update(int(store_id), name=name, latitude=latitude, longitude=longitude):
            raise NotFoundError("Store not found.")
        logger.info("Updated store id=%s name=%r", store_id, name)

    def delete(self, store_id: int) -> None:
        if not self._stores.delete(int(store_id)):
            raise NotFoundError("Store not found.")
        logger.info("Deleted store id=%s", store_id)

    def resolve_branch(self, branch: str) -> BranchMatch:
        """Match an employee's branch name against store names (exact match)."""
        candidates = list(self._stores.find_by_name(branch)) if branch else []
        if not candidates:
            return BranchMatch(branch=branch, store=None)

        if len(candidates) > 1:
            logger.warning(
                "Branch %r matches %d stores; using store id=%s",
                branch,
                len(candidates),
                candidates[0].store_id,
            )
        return BranchMatch(branch=branch, store=candidates[0], ambiguous=len(candidates) > 1)

    @staticmethod
    def _parse(payload: Mapping[str, Any]):
        require_fields(payload, "name", "latitude", "longitude")
        return (
            require_non_empty(payload["name"], "name"),
            require_coordinate(payload["latitude"], "latitude", limit=90),
            require_coordinate(payload["longitude"], "longitude", limit=180),
        )


def store_to_dict(s: Store) -> dict:
    return {
        "id": s.store_id,
        "name": s.name,
        "latitude": float(s.latitude),
        "longitude": float(s.longitude),
    }
