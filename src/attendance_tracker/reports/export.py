from __future__ import annotations

import io

import pandas as pd

from .aggregation import DateGroup
from .service import groups_to_rows

EXPORT_COLUMNS = ["Date", "Employee ID", "Name", "Check In", "Check Out", "Total Hours", "Status"]


def attendance_to_excel(groups: list[DateGroup]) -> io.BytesIO:
    """Write the grouped attendance table to an in-memory .xlsx file."""
    data = [
        {
            "Date": row["date"],
            "Employee ID": row["employee_id"],
            "Name": row["name"],
            "Check In": ", ".join(row["check_ins"]),
            "Check Out": ", ".join(row["check_outs"]),
            "Total Hours": row["total_hours"],
            "Status": row["status"],
        }
        for row in groups_to_rows(groups)
    ]
    df = pd.DataFrame(data, columns=EXPORT_COLUMNS)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Attendance")

    output.seek(0)
    return output
