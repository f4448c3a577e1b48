from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecordRow, AttendanceView
from ..classes.model import ClassRoom
from ..common.datetime_utils import format_iso_date
from ..core.constants import CSV_HEADERS
from ..students.model import Student


def to_csv(rows: Iterable[AttendanceRecordRow]) -> str:
    """Date,Class,Student,Status; one line per persisted record."""
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for row in rows:
        writer.writerow([format_iso_date(row.day), row.class_name, row.student_name, row.status.value])
    # no trailing newline after the last row
    return out.getvalue().rstrip("\n")


def export_filename(today: date) -> str:
    return f"attendance_records_{format_iso_date(today)}.csv"


def day_export_filename(classroom: ClassRoom, day: date) -> str:
    return f"attendance_class{classroom.class_id}_{format_iso_date(day)}.csv"


def rows_from_view(
    classroom: ClassRoom,
    roster: Sequence[Student],
    view: AttendanceView,
) -> list[AttendanceRecordRow]:
    """Persisted entries of a day's view as export rows (unmarked students have no record)."""
    names = {s.student_id: s.name for s in roster}
    return [
        AttendanceRecordRow(
            attendance_id=entry.record_id,
            day=entry.day,
            class_id=classroom.class_id,
            class_name=classroom.name,
            student_id=entry.student_id,
            student_name=names.get(entry.student_id, ""),
            status=entry.status,
        )
        for entry in view.entries
        if entry.record_id is not None
    ]
