"""Provision an administrator account.

Usage: python scripts/create_admin.py EMPLOYEE_ID NAME EMAIL PASSWORD
"""

from __future__ import annotations

import argparse
import importlib

from dotenv import load_dotenv

from attendance_tracker.container import build_container
from attendance_tracker.core.enums import Role
from attendance_tracker.settings import get_settings_module


def main() -> None:
    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("employee_id")
    parser.add_argument("name")
    parser.add_argument("email")
    parser.add_argument("password")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=dict(settings.DB_CONFIG))

    uid = container.employee_service.provision(
        employee_id=args.employee_id,
        name=args.name,
        email=args.email,
        password=args.password,
        position="Administrator",
        role=Role.ADMIN,
    )
    print(f"OK: admin {args.email} created (uid={uid})")


if __name__ == "__main__":
    main()
