from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from dataclasses import replace
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Optional

import pytest

from src.timeclock_payroll.timeclock_payroll.admins.model import Admin
from src.timeclock_payroll.timeclock_payroll.attendance.model import AttendanceSession
from src.timeclock_payroll.timeclock_payroll.common.datetime_utils import hours_between
from src.timeclock_payroll.timeclock_payroll.container import wire_services
from src.timeclock_payroll.timeclock_payroll.core.enums import AdminRole, EmployeeStatus
from src.timeclock_payroll.timeclock_payroll.employees.model import Employee, EmployeeUpdate
from src.timeclock_payroll.timeclock_payroll.main import create_app
from src.timeclock_payroll.timeclock_payroll.payroll.model import PayrollRecord
from src.timeclock_payroll.timeclock_payroll.stores.model import Store


class InMemoryEmployees:
    def __init__(self):
        self._rows: dict[int, Employee] = {}
        self._next_id = 0
        self.deleted_sessions_for: list[str] = []
        self.sessions: Optional["InMemorySessions"] = None

    def add(
        self,
        user_id: str,
        *,
        branch: str = "Central",
        status: EmployeeStatus = EmployeeStatus.APPROVED,
        daily_rate=None,
        bonus=None,
        compensation=None,
        full_name: Optional[str] = None,
    ) -> Employee:
        self._next_id += 1
        emp = Employee(
            employee_id=self._next_id,
            user_id=user_id,
            full_name=full_name or f"Employee {user_id}",
            phone="0800000000",
            branch=branch,
            status=status,
            daily_rate=Decimal(str(daily_rate)) if daily_rate is not None else None,
            bonus=Decimal(str(bonus)) if bonus is not None else None,
            compensation=Decimal(str(compensation)) if compensation is not None else None,
        )
        self._rows[emp.employee_id] = emp
        return emp

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        return next((e for e in self._rows.values() if e.user_id == user_id), None)

    def list_all(self):
        return [self._rows[k] for k in sorted(self._rows)]

    def create(self, *, user_id: str, full_name: str, phone: str, branch: str) -> int:
        emp = self.add(user_id, branch=branch, status=EmployeeStatus.PENDING, full_name=full_name)
        self._rows[emp.employee_id] = replace(emp, phone=phone)
        return emp.employee_id

    def update(self, employee_id: int, changes: EmployeeUpdate) -> bool:
        emp = self._rows.get(int(employee_id))
        if not emp:
            return False
        self._rows[emp.employee_id] = replace(
            emp,
            full_name=changes.full_name,
            phone=changes.phone,
            branch=changes.branch,
            status=changes.status,
            daily_rate=changes.daily_rate,
            bonus=changes.bonus,
            compensation=changes.compensation,
            employee_type=changes.employee_type,
        )
        return True

    def delete_with_sessions(self, employee_id: int) -> bool:
        emp = self._rows.pop(int(employee_id), None)
        if not emp:
            return False
        if self.sessions is not None:
            self.sessions.remove_user(emp.user_id)
        self.deleted_sessions_for.append(emp.user_id)
        return True

    def list_branches(self):
        return sorted({e.branch for e in self._rows.values() if e.branch})


class InMemoryStores:
    def __init__(self):
        self._rows: dict[int, Store] = {}
        self._next_id = 0

    def add(self, name: str, latitude, longitude) -> Store:
        self._next_id += 1
        store = Store(
            store_id=self._next_id,
            name=name,
            latitude=Decimal(str(latitude)),
            longitude=Decimal(str(longitude)),
        )
        self._rows[store.store_id] = store
        return store

    def list_all(self):
        return [self._rows[k] for k in sorted(self._rows)]

    def get_by_id(self, store_id: int):
        return self._rows.get(int(store_id))

    def find_by_name(self, name: str):
        return [s for s in self.list_all() if s.name == name]

    def create(self, *, name, latitude, longitude) -> int:
        return self.add(name, latitude, longitude).store_id

    def update(self, store_id: int, *, name, latitude, longitude) -> bool:
        if int(store_id) not in self._rows:
            return False
        self._rows[int(store_id)] = Store(store_id=int(store_id), name=name, latitude=latitude, longitude=longitude)
        return True

    def delete(self, store_id: int) -> bool:
        return self._rows.pop(int(store_id), None) is not None


class _InMemoryUnitOfWork:
    def __init__(self, repo: "InMemorySessions", user_id: str):
        self._repo = repo
        self._user_id = user_id

    def find_open(self):
        gate = self._repo.gates.get(self._user_id)
        if gate is not None:
            self._repo.entered.set()
            gate.wait(timeout=5)
        found = self._repo.find_open(self._user_id)
        # Widen the read-then-write window so unserialized callers would race.
        if self._repo.read_delay:
            time.sleep(self._repo.read_delay)
        return found

    def open_session(self, *, clock_in, latitude, longitude):
        return self._repo.insert(
            AttendanceSession(
                session_id=0,
                user_id=self._user_id,
                clock_in=clock_in,
                clock_out=None,
                latitude=latitude,
                longitude=longitude,
            )
        )

    def close_session(self, session, *, clock_out, total_hours):
        closed = replace(session, clock_out=clock_out, total_hours=total_hours)
        self._repo.rows[session.session_id] = closed
        return closed


class InMemorySessions:
    def __init__(self, *, read_delay: float = 0.0):
        self.rows: dict[int, AttendanceSession] = {}
        self._next_id = 0
        self._id_lock = threading.Lock()
        self.read_delay = read_delay
        # user_id -> Event; that user's find_open blocks until it is set.
        self.gates: dict[str, threading.Event] = {}
        self.entered = threading.Event()

    @contextmanager
    def locked(self, user_id: str):
        # No locking here: serialization has to come from the caller.
        yield _InMemoryUnitOfWork(self, user_id)

    def insert(self, session: AttendanceSession) -> AttendanceSession:
        with self._id_lock:
            self._next_id += 1
            stored = replace(session, session_id=self._next_id)
            self.rows[stored.session_id] = stored
        return stored

    def add_closed(self, user_id: str, clock_in: datetime, hours: float) -> AttendanceSession:
        clock_out = clock_in + timedelta(hours=hours)
        return self.insert(
            AttendanceSession(
                session_id=0,
                user_id=user_id,
                clock_in=clock_in,
                clock_out=clock_out,
                latitude=Decimal("0"),
                longitude=Decimal("0"),
                total_hours=hours_between(clock_in, clock_out),
            )
        )

    def add_open(self, user_id: str, clock_in: datetime) -> AttendanceSession:
        return self.insert(
            AttendanceSession(
                session_id=0,
                user_id=user_id,
                clock_in=clock_in,
                clock_out=None,
                latitude=Decimal("0"),
                longitude=Decimal("0"),
            )
        )

    def remove_user(self, user_id: str) -> None:
        for sid in [k for k, s in self.rows.items() if s.user_id == user_id]:
            del self.rows[sid]

    def open_sessions(self, user_id: str):
        return [s for s in list(self.rows.values()) if s.user_id == user_id and s.clock_out is None]

    def find_open(self, user_id: str):
        found = sorted(self.open_sessions(user_id), key=lambda s: s.clock_in)
        return found[0] if found else None

    def list_for_user(self, user_id: str):
        return sorted(
            (s for s in self.rows.values() if s.user_id == user_id),
            key=lambda s: (s.clock_in, s.session_id),
        )

    def list_all(self):
        return sorted(self.rows.values(), key=lambda s: (s.clock_in, s.session_id))

    def list_hours_in_period(self, user_id: str, *, start_date: date, end_date: date):
        return [s.total_hours for s in self.list_for_user(user_id) if start_date <= s.clock_in.date() <= end_date]


class InMemoryPayroll:
    def __init__(self, *, fail_for_employee: Optional[int] = None):
        self.rows: list[PayrollRecord] = []
        self.fail_for_employee = fail_for_employee

    def insert(self, *, employee_id, start_date, end_date, total_days_worked, total_hours_worked, salary, bonus, compensation, total_pay) -> int:
        if self.fail_for_employee is not None and employee_id == self.fail_for_employee:
            raise ConnectionError("payroll table unavailable")
        rec = PayrollRecord(
            record_id=len(self.rows) + 1,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            total_days_worked=total_days_worked,
            total_hours_worked=total_hours_worked,
            salary=salary,
            bonus=bonus,
            compensation=compensation,
            total_pay=total_pay,
            created_at=datetime(2026, 7, 1, 9, 0),
        )
        self.rows.append(rec)
        return rec.record_id

    def list_records(self, *, employee_id=None, limit=500):
        rows = [r for r in reversed(self.rows) if employee_id is None or r.employee_id == employee_id]
        return rows[:limit]


class InMemoryAdmins:
    def __init__(self):
        self._rows: dict[str, Admin] = {}

    def get_by_username(self, username: str):
        return self._rows.get(username)

    def create(self, *, username, password_hash, role: AdminRole) -> int:
        admin = Admin(admin_id=len(self._rows) + 1, username=username, password_hash=password_hash, role=role)
        self._rows[username] = admin
        return admin.admin_id


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def stores_repo():
    repo = InMemoryStores()
    repo.add("Central", "13.7563", "100.5018")
    return repo


@pytest.fixture
def sessions_repo(employees_repo):
    repo = InMemorySessions()
    employees_repo.sessions = repo
    return repo


@pytest.fixture
def payroll_repo():
    return InMemoryPayroll()


@pytest.fixture
def admins_repo():
    return InMemoryAdmins()


@pytest.fixture
def container(employees_repo, stores_repo, sessions_repo, payroll_repo, admins_repo):
    return wire_services(
        conn=None,
        employees_repo=employees_repo,
        stores_repo=stores_repo,
        sessions_repo=sessions_repo,
        payroll_repo=payroll_repo,
        admins_repo=admins_repo,
        secret_key="test-secret",
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(container):
    container.admin_auth_service.register(username="boss", password="secret123", role="admin")
    token = container.admin_auth_service.login(username="boss", password="secret123")
    return {"Authorization": f"Bearer {token}"}
