from datetime import date, datetime

import pandas as pd

from attendance_tracker.reports.aggregation import group_by_date_and_employee
from attendance_tracker.reports.export import EXPORT_COLUMNS, attendance_to_excel


def test_excel_export_writes_one_row_per_employee_day(record_factory):
    groups = group_by_date_and_employee(
        [
            record_factory(2, check_in=datetime(2025, 3, 10, 13, 0), minutes=60),
            record_factory(1, check_in=datetime(2025, 3, 10, 8, 0), minutes=240),
            record_factory(3, user_id="u2", employee_id="E002", name="Bob", work_date=date(2025, 3, 9)),
        ]
    )

    df = pd.read_excel(attendance_to_excel(groups), sheet_name="Attendance")

    assert list(df.columns) == EXPORT_COLUMNS
    assert len(df) == 2
    assert df.loc[0, "Check In"] == "01:00 PM, 08:00 AM"
    assert df.loc[0, "Total Hours"] == "5h 0m"
    assert df.loc[1, "Status"] == "In Progress"
