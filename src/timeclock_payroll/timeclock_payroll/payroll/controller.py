from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_body, json_endpoint, make_admin_required
from ..core.exceptions import ValidationError
from ..container import Container
from .service import REPORT_FIELDS, PayrollReport, line_to_dict, record_to_dict


def register(app: Flask, container: Container) -> None:
    admin_required = make_admin_required(container.admin_auth_service)
    svc = container.payroll_report_service

    def _parse_date(value, field_name: str):
        if not value:
            raise ValidationError("Start date and end date are required.")
        try:
            return parse_iso_date(str(value))
        except ValueError:
            raise ValidationError(f"{field_name} must be a YYYY-MM-DD date.")

    def _write_report_csv(report: PayrollReport):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS, extrasaction="ignore")
        writer.writeheader()
        for line in report.lines:
            writer.writerow(line_to_dict(line))

        filename = f"payroll_{report.period.start.isoformat()}_{report.period.end.isoformat()}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/payroll/calculate-payroll", methods=["POST"], endpoint="calculate_payroll")
    @app.route("/api/users/calculate-payroll", methods=["POST"], endpoint="calculate_payroll")
    @admin_required
    @json_endpoint
    def calculate_payroll():
        data = json_body()
        if not data.get("start_date") or not data.get("end_date"):
            raise ValidationError("Start date and end date are required.")
        start = _parse_date(data.get("start_date"), "start_date")
        end = _parse_date(data.get("end_date"), "end_date")

        report = svc.run_payroll(start=start, end=end)
        if request.args.get("format") == "csv":
            return _write_report_csv(report)
        return jsonify([line_to_dict(line) for line in report.lines])

    @app.route("/api/payroll/records", methods=["GET"], endpoint="payroll_records")
    @admin_required
    @json_endpoint
    def payroll_records():
        employee_id = request.args.get("employee_id", type=int)
        return jsonify([record_to_dict(r) for r in svc.list_records(employee_id=employee_id)])
