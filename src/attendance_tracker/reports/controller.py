from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, jsonify, request, send_file, session

from ..common.datetime_utils import now_local, parse_iso_date, parse_month_key
from ..common.guards import admin_required, login_required
from ..container import Container
from .export import attendance_to_excel
from .service import groups_to_rows, snapshot_to_ui


def register(app: Flask, container: Container) -> None:
    def _filters() -> tuple[Optional[str], Optional[date], Optional[str]]:
        employee_id = (request.args.get("employee_id") or "").strip() or None
        date_s = (request.args.get("date") or "").strip()
        month = (request.args.get("month") or "").strip() or None

        work_date = parse_iso_date(date_s) if date_s else None
        if month:
            parse_month_key(month)
        return employee_id, work_date, month

    def _bad_filter():
        return jsonify({"success": False, "message": "Invalid date or month filter"}), 400

    @app.route("/api/me/summary", methods=["GET"], endpoint="me_summary")
    @login_required
    def me_summary():
        summary = container.report_service.employee_month_summary(session["user_id"])
        return jsonify(
            {
                "success": True,
                "present_days": summary.present_days,
                "leaves_this_month": summary.leaves_this_month,
            }
        )

    @app.route("/api/admin/stats", methods=["GET"], endpoint="admin_stats")
    @admin_required
    def admin_stats():
        today = now_local().date()
        snapshot = container.report_service.admin_snapshot(today=today)
        return jsonify({"success": True, "date": today.strftime("%d/%m/%Y"), "stats": snapshot_to_ui(snapshot)})

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @admin_required
    def admin_attendance():
        try:
            employee_id, work_date, month = _filters()
        except ValueError:
            return _bad_filter()

        groups = container.report_service.all_attendance(employee_id=employee_id, work_date=work_date, month=month)
        return jsonify({"success": True, "rows": groups_to_rows(groups)})

    @app.route("/api/admin/attendance.xlsx", methods=["GET"], endpoint="admin_attendance_export")
    @admin_required
    def admin_attendance_export():
        try:
            employee_id, work_date, month = _filters()
        except ValueError:
            return _bad_filter()

        groups = container.report_service.all_attendance(employee_id=employee_id, work_date=work_date, month=month)
        return send_file(
            attendance_to_excel(groups),
            download_name="attendance_report.xlsx",
            as_attachment=True,
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )
