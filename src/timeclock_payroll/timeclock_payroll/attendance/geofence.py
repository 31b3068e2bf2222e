from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from ..common.validators import to_decimal
from ..core.constants import DEFAULT_GEOFENCE_RADIUS


@dataclass(frozen=True)
class Coordinate:
    latitude: Decimal
    longitude: Decimal

    @classmethod
    def of(cls, latitude: Any, longitude: Any) -> "Coordinate":
        return cls(latitude=to_decimal(latitude), longitude=to_decimal(longitude))


@dataclass(frozen=True)
class GeofenceDecision:
    accepted: bool
    distance: Decimal
    radius: Decimal


class GeofenceValidator:
    """Accept clock events made close enough to the store.

    Distance is planar Euclidean over raw degrees (latitude and longitude used
    as Cartesian units). That is only a fair approximation over small areas;
    it is not a geodesic distance. The boundary is inclusive.
    """

    def __init__(self, radius: Decimal | float | str = DEFAULT_GEOFENCE_RADIUS):
        self._radius = to_decimal(radius)

    @property
    def radius(self) -> Decimal:
        return self._radius

    @staticmethod
    def distance(a: Coordinate, b: Coordinate) -> Decimal:
        d_lat = a.latitude - b.latitude
        d_lng = a.longitude - b.longitude
        return (d_lat * d_lat + d_lng * d_lng).sqrt()

    def validate(self, employee: Coordinate, store: Coordinate) -> GeofenceDecision:
        distance = self.distance(employee, store)
        return GeofenceDecision(accepted=distance <= self._radius, distance=distance, radius=self._radius)
