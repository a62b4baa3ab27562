from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local, today_date_key
from ..common.guards import login_required
from ..core.exceptions import NoOpenSession, SessionAlreadyOpen, ValidationError
from ..container import Container
from .service import record_to_ui


def register(app: Flask, container: Container) -> None:
    def _current_user() -> tuple[str, str, str]:
        return session["user_id"], session.get("employee_id", ""), session.get("name", "")

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        now = now_local()
        record = container.attendance_service.find_open_or_latest_today(session["user_id"], now=now)
        return jsonify(
            {
                "success": True,
                "date": today_date_key(now),
                "is_checked_in": bool(record and record.is_open),
                "record": record_to_ui(record) if record else None,
            }
        )

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        user_id, employee_id, name = _current_user()
        try:
            attendance_id = container.attendance_service.open_session(user_id, employee_id, name)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except SessionAlreadyOpen as e:
            return jsonify({"success": False, "message": str(e)}), 409
        return jsonify({"success": True, "message": "Checked in successfully!", "attendance_id": attendance_id})

    @app.route("/api/attendance/checkout", methods=["POST"], endpoint="checkout")
    @login_required
    def checkout():
        try:
            record = container.attendance_service.close_session(session["user_id"])
        except NoOpenSession as e:
            return jsonify({"success": False, "message": str(e)}), 409
        return jsonify({"success": True, "message": "Checked out successfully!", "record": record_to_ui(record)})

    @app.route("/api/attendance/toggle", methods=["POST"], endpoint="attendance_toggle")
    @login_required
    def attendance_toggle():
        """Single-button check-in/check-out, auto-detected from today's latest record."""
        user_id, employee_id, name = _current_user()
        try:
            result = container.attendance_service.toggle(user_id, employee_id, name)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except (NoOpenSession, SessionAlreadyOpen) as e:
            return jsonify({"success": False, "message": str(e)}), 409

        message = "Checked out successfully!" if result.action == "check_out" else "Checked in successfully!"
        return jsonify(
            {
                "success": True,
                "action": result.action,
                "message": message,
                "attendance_id": result.attendance_id,
                "is_checked_in": result.action == "check_in",
            }
        )

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        try:
            limit = int(request.args.get("limit", 0))
        except ValueError:
            limit = 0
        if limit <= 0:
            limit = None
        data = container.attendance_service.history_days(session["user_id"], limit=limit)
        return jsonify({"success": True, "days": data})
