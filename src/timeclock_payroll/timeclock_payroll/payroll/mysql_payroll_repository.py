from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.validators import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PayrollRecord
from .repository import PayrollRepository


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        total_days_worked: Decimal,
        total_hours_worked: Decimal,
        salary: Decimal,
        bonus: Decimal,
        compensation: Decimal,
        total_pay: Decimal,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll(
                    employee_id, start_date, end_date, total_days_worked, total_hours_worked,
                    salary, bonus, compensation, total_pay
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    start_date,
                    end_date,
                    total_days_worked,
                    total_hours_worked,
                    salary,
                    bonus,
                    compensation,
                    total_pay,
                ),
            )
            return int(cur.lastrowid)

    def list_records(self, *, employee_id: Optional[int] = None, limit: int = 500) -> Sequence[PayrollRecord]:
        clauses: list[str] = []
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, employee_id, start_date, end_date, total_days_worked, total_hours_worked,
                       salary, bonus, compensation, total_pay, created_at
                FROM payroll
                {where}
                ORDER BY id DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [
                PayrollRecord(
                    record_id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    start_date=r["start_date"],
                    end_date=r["end_date"],
                    total_days_worked=to_decimal(r["total_days_worked"]),
                    total_hours_worked=to_decimal(r["total_hours_worked"]),
                    salary=to_decimal(r["salary"]),
                    bonus=to_decimal(r["bonus"]),
                    compensation=to_decimal(r["compensation"]),
                    total_pay=to_decimal(r["total_pay"]),
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]
