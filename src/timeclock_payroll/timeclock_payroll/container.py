from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .admins.mysql_admin_repository import MySQLAdminRepository
from .admins.repository import AdminRepository
from .admins.service import AdminAuthService
from .attendance.geofence import GeofenceValidator
from .attendance.mysql_session_repository import MySQLSessionRepository
from .attendance.repository import SessionRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ADMIN_TOKEN_MAX_AGE, DEFAULT_BONUS_MAX_ABSENCE_DAYS, DEFAULT_GEOFENCE_RADIUS
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .payroll.service import PayrollReportService
from .stores.mysql_store_repository import MySQLStoreRepository
from .stores.repository import StoreRepository
from .stores.service import StoreService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    stores_repo: StoreRepository
    sessions_repo: SessionRepository
    payroll_repo: PayrollRepository
    admins_repo: AdminRepository

    employee_service: EmployeeService
    store_service: StoreService
    attendance_service: AttendanceService
    payroll_report_service: PayrollReportService
    admin_auth_service: AdminAuthService


def wire_services(
    *,
    conn: Optional[DatabaseConnection],
    employees_repo: EmployeeRepository,
    stores_repo: StoreRepository,
    sessions_repo: SessionRepository,
    payroll_repo: PayrollRepository,
    admins_repo: AdminRepository,
    secret_key: str,
    geofence_radius: Decimal | float | str = DEFAULT_GEOFENCE_RADIUS,
    bonus_max_absence_days: Decimal | float | str = DEFAULT_BONUS_MAX_ABSENCE_DAYS,
    token_max_age: int = DEFAULT_ADMIN_TOKEN_MAX_AGE,
) -> Container:
    """Build services on top of any repositories honoring the Protocols."""
    store_service = StoreService(stores_repo)
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        stores_repo=stores_repo,
        sessions_repo=sessions_repo,
        payroll_repo=payroll_repo,
        admins_repo=admins_repo,
        employee_service=EmployeeService(employees_repo),
        store_service=store_service,
        attendance_service=AttendanceService(
            sessions_repo,
            employees_repo,
            store_service,
            geofence=GeofenceValidator(geofence_radius),
        ),
        payroll_report_service=PayrollReportService(
            employees_repo,
            sessions_repo,
            payroll_repo,
            calculator=StandardPayrollCalculator(max_absence_days=Decimal(str(bonus_max_absence_days))),
        ),
        admin_auth_service=AdminAuthService(admins_repo, secret_key=secret_key, token_max_age=token_max_age),
    )


def build_container(
    *,
    db_config: dict,
    secret_key: str,
    geofence_radius: Decimal | float | str = DEFAULT_GEOFENCE_RADIUS,
    bonus_max_absence_days: Decimal | float | str = DEFAULT_BONUS_MAX_ABSENCE_DAYS,
    token_max_age: int = DEFAULT_ADMIN_TOKEN_MAX_AGE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_services(
        conn=conn,
        employees_repo=MySQLEmployeeRepository(conn),
        stores_repo=MySQLStoreRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        payroll_repo=MySQLPayrollRepository(conn),
        admins_repo=MySQLAdminRepository(conn),
        secret_key=secret_key,
        geofence_radius=geofence_radius,
        bonus_max_absence_days=bonus_max_absence_days,
        token_max_age=token_max_age,
    )
