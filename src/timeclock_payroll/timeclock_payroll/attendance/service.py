from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import hours_between, now_local
from ..common.locks import KeyedLock
from ..common.validators import require_coordinate, require_non_empty
from ..core.enums import ClockAction
from ..core.exceptions import (
    NoStoreForBranchError,
    NotApprovedError,
    NotRegisteredError,
    OutOfRangeError,
    ValidationError,
)
from ..core.logging import get_logger
from ..employees.repository import EmployeeRepository
from ..stores.service import StoreService
from .geofence import Coordinate, GeofenceValidator
from .model import AttendanceSession, ClockResult
from .repository import SessionRepository

logger = get_logger(__name__)


class AttendanceService:
    """Clock-in/clock-out tracking.

    A clock event toggles the employee's session: with no open session it
    opens one, otherwise it closes the open one. Stale open sessions are never
    closed automatically; the next event closes them however late it comes.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        employees: EmployeeRepository,
        stores: StoreService,
        *,
        geofence: GeofenceValidator | None = None,
    ):
        self._sessions = sessions
        self._employees = employees
        self._stores = stores
        self._geofence = geofence or GeofenceValidator()
        self._locks = KeyedLock()

    def record_event(
        self,
        user_id: Any,
        latitude: Any,
        longitude: Any,
        *,
        now: Optional[datetime] = None,
    ) -> ClockResult:
        if user_id is None or latitude is None or longitude is None:
            raise ValidationError("All fields (user_id, latitude, longitude) are required")
        user_id = require_non_empty(user_id, "user_id")
        coord = Coordinate(
            latitude=require_coordinate(latitude, "latitude", limit=90),
            longitude=require_coordinate(longitude, "longitude", limit=180),
        )

        employee = self._employees.get_by_user_id(user_id)
        if not employee:
            raise NotRegisteredError("User is not registered.")
        if not employee.is_approved:
            raise NotApprovedError("User is not approved to clock in/out.")

        match = self._stores.resolve_branch(employee.branch)
        if not match.found:
            raise NoStoreForBranchError(f"No store found for branch '{employee.branch}'")

        store = match.store
        decision = self._geofence.validate(coord, Coordinate(store.latitude, store.longitude))
        if not decision.accepted:
            logger.warning(
                "Rejected clock event user_id=%s store=%r distance=%s radius=%s",
                user_id,
                store.name,
                decision.distance,
                decision.radius,
            )
            raise OutOfRangeError("You are not within the allowed range to clock in/out.")

        # The lookup may match case-insensitively; key everything by the stored id.
        user_id = employee.user_id
        with self._locks.hold(user_id):
            # Read "now" inside the critical section so a queued event never
            # closes a session with a timestamp earlier than its clock-in.
            # Whole seconds only: the columns do not keep fractions.
            now = (now or now_local()).replace(microsecond=0)
            with self._sessions.locked(user_id) as uow:
                current = uow.find_open()
                if current is None:
                    session = uow.open_session(
                        clock_in=now,
                        latitude=coord.latitude,
                        longitude=coord.longitude,
                    )
                    result = ClockResult(action=ClockAction.OPENED, session=session)
                else:
                    total_hours = hours_between(current.clock_in, now)
                    session = uow.close_session(current, clock_out=now, total_hours=total_hours)
                    result = ClockResult(action=ClockAction.CLOSED, session=session)

        if result.opened:
            logger.info("Clock-in user_id=%s store=%r at %s", user_id, store.name, now.isoformat())
        else:
            logger.info(
                "Clock-out user_id=%s store=%r at %s (%s h)",
                user_id,
                store.name,
                now.isoformat(),
                result.session.total_hours,
            )
        return result

    def find_open_session(self, user_id: str) -> Optional[AttendanceSession]:
        return self._sessions.find_open(str(user_id))

    def history(self, user_id: str) -> Sequence[AttendanceSession]:
        user_id = require_non_empty(user_id, "User ID")
        return self._sessions.list_for_user(user_id)

    def list_all(self) -> Sequence[AttendanceSession]:
        return self._sessions.list_all()


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def session_to_dict(s: AttendanceSession) -> dict:
    return {
        "id": s.session_id,
        "user_id": s.user_id,
        "clock_in": _iso(s.clock_in),
        "clock_out": _iso(s.clock_out),
        "latitude": float(s.latitude),
        "longitude": float(s.longitude),
        "total_hours": float(s.total_hours) if s.total_hours is not None else None,
    }


def clock_result_to_dict(result: ClockResult) -> dict:
    s = result.session
    if result.opened:
        return {
            "message": "Clock-In successful",
            "action": result.action.value,
            "clock_in": _iso(s.clock_in),
        }
    return {
        "message": "Clock-Out successful",
        "action": result.action.value,
        "clock_in": _iso(s.clock_in),
        "clock_out": _iso(s.clock_out),
        "total_hours": float(s.total_hours) if s.total_hours is not None else None,
    }
