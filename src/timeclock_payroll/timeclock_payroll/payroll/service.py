from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import SessionRepository
from ..core.constants import DEFAULT_PAYROLL_HISTORY_LIMIT
from ..core.logging import get_logger
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .classifier import DayCreditClassifier
from .model import PayPeriod, PayrollLine, PayrollRecord, PayRates
from .repository import PayrollRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class PayrollReport:
    period: PayPeriod
    lines: list[PayrollLine]


class PayrollReportService:
    """Compute pay for every employee over a period and record the result.

    Each run appends one payroll row per employee; re-running a period adds
    new rows rather than replacing earlier ones. A failure for one employee
    aborts the run, leaving rows already written for earlier employees.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        sessions: SessionRepository,
        payroll: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        classifier: Optional[DayCreditClassifier] = None,
    ):
        self._employees = employees
        self._sessions = sessions
        self._payroll = payroll
        self._calculator = calculator or StandardPayrollCalculator()
        self._classifier = classifier or DayCreditClassifier()

    def compute_employee(self, employee: Employee, period: PayPeriod) -> PayrollLine:
        hours = self._sessions.list_hours_in_period(employee.user_id, start_date=period.start, end_date=period.end)
        summary = self._classifier.summarize(hours)
        absence_days = self._classifier.absence_days(summary.days_worked, period)

        pay = self._calculator.compute(
            rates=PayRates.for_employee(employee),
            days_worked=summary.days_worked,
            absence_days=absence_days,
            end_of_month=period.is_end_of_month,
        )

        return PayrollLine(
            employee_id=employee.employee_id,
            user_id=employee.user_id,
            full_name=employee.full_name,
            branch=employee.branch,
            total_hours=summary.total_hours,
            total_days_worked=summary.days_worked,
            salary=pay.salary,
            bonus=pay.bonus,
            compensation=pay.compensation,
            total_pay=pay.total_pay,
            absence_days=absence_days,
            total_days_in_period=period.days_in_period,
            total_days_in_month=period.days_in_month,
        )

    def compute_period(self, *, start: date, end: date) -> list[PayrollLine]:
        """Preview a run without recording anything."""
        period = PayPeriod(start=start, end=end)
        return [self.compute_employee(e, period) for e in self._employees.list_all()]

    def run_payroll(self, *, start: date, end: date) -> PayrollReport:
        period = PayPeriod(start=start, end=end)
        lines: list[PayrollLine] = []

        # Every employee gets a line, including those without sessions.
        for employee in self._employees.list_all():
            line = self.compute_employee(employee, period)
            record_id = self._payroll.insert(
                employee_id=line.employee_id,
                start_date=period.start,
                end_date=period.end,
                total_days_worked=line.total_days_worked,
                total_hours_worked=line.total_hours,
                salary=line.salary,
                bonus=line.bonus,
                compensation=line.compensation,
                total_pay=line.total_pay,
            )
            lines.append(_with_record_id(line, record_id))

        logger.info(
            "Payroll run %s..%s: %d employees (end_of_month=%s)",
            period.start.isoformat(),
            period.end.isoformat(),
            len(lines),
            period.is_end_of_month,
        )
        return PayrollReport(period=period, lines=lines)

    def list_records(
        self,
        *,
        employee_id: Optional[int] = None,
        limit: int = DEFAULT_PAYROLL_HISTORY_LIMIT,
    ) -> Sequence[PayrollRecord]:
        return self._payroll.list_records(employee_id=employee_id, limit=limit)


def _with_record_id(line: PayrollLine, record_id: int) -> PayrollLine:
    return replace(line, record_id=record_id)


REPORT_FIELDS = [
    "employee_id",
    "fullName",
    "branch",
    "totalHours",
    "totalDaysWorked",
    "salary",
    "bonus",
    "compensation",
    "totalPay",
    "absenceDays",
    "totalDaysInPeriod",
    "totalDaysInMonth",
]


def line_to_dict(line: PayrollLine) -> dict:
    return {
        "employee_id": line.employee_id,
        "userId": line.user_id,
        "fullName": line.full_name,
        "branch": line.branch,
        "totalHours": float(line.total_hours),
        "totalDaysWorked": float(line.total_days_worked),
        "salary": float(line.salary),
        "bonus": float(line.bonus),
        "compensation": float(line.compensation),
        "totalPay": float(line.total_pay),
        "absenceDays": float(line.absence_days),
        "totalDaysInPeriod": line.total_days_in_period,
        "totalDaysInMonth": line.total_days_in_month,
        "payrollRecordId": line.record_id,
    }


def record_to_dict(r: PayrollRecord) -> dict:
    return {
        "id": r.record_id,
        "employee_id": r.employee_id,
        "start_date": r.start_date.isoformat(),
        "end_date": r.end_date.isoformat(),
        "total_days_worked": float(r.total_days_worked),
        "total_hours_worked": float(r.total_hours_worked),
        "salary": float(r.salary),
        "bonus": float(r.bonus),
        "compensation": float(r.compensation),
        "total_pay": float(r.total_pay),
        "created_at": r.created_at.isoformat() if r.created_at else None,
    }
