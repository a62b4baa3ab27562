from __future__ import annotations

import logging

from flask import Flask, jsonify, request, session

from ..common.guards import admin_required
from ..core.exceptions import AuthError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def _profile_to_ui(p) -> dict:
    return {
        "uid": p.uid,
        "employee_id": p.employee_id,
        "name": p.name,
        "role": p.role.value,
        "email": p.email,
        "position": p.position,
        "notes": p.notes,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            s_user = container.auth_service.login(data.get("email", ""), data.get("password", ""))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except AuthError as e:
            logger.info("login failed email=%s code=%s", data.get("email"), e.code.value)
            return jsonify({"success": False, "message": str(e), "code": e.code.value}), 401

        session.clear()
        session["user_id"] = s_user.uid
        session["employee_id"] = s_user.employee_id
        session["name"] = s_user.name
        session["role"] = s_user.role.value

        return jsonify(
            {
                "success": True,
                "message": "Logged in",
                "user": {
                    "uid": s_user.uid,
                    "employee_id": s_user.employee_id,
                    "name": s_user.name,
                    "role": s_user.role.value,
                },
            }
        )

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True, "message": "Logged out"})

    @app.route("/api/admin/employees", methods=["GET"], endpoint="admin_employees")
    @admin_required
    def admin_employees():
        employees = container.employee_service.list_employees()
        return jsonify({"success": True, "employees": [_profile_to_ui(p) for p in employees]})

    @app.route("/api/admin/employees", methods=["POST"], endpoint="admin_add_employee")
    @admin_required
    def admin_add_employee():
        data = request.get_json(silent=True) or {}
        try:
            uid = container.employee_service.provision(
                employee_id=data.get("employee_id", ""),
                name=data.get("name", ""),
                email=data.get("email", ""),
                password=data.get("password", ""),
                position=data.get("position", ""),
                notes=data.get("notes", ""),
            )
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except AuthError as e:
            return jsonify({"success": False, "message": str(e), "code": e.code.value}), 400

        return jsonify({"success": True, "message": "Employee added successfully!", "uid": uid}), 201
