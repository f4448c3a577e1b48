from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecordRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.validators import parse_id
from ..core.constants import DEFAULT_RECORDS_DAYS
from ..core.exceptions import ValidationError
from ..core.session import StoreSession

ALL = "all"


@dataclass(frozen=True)
class RecordFilters:
    start: date
    end: date
    class_id: Optional[int] = None
    student_id: Optional[int] = None

    def to_query(self) -> dict[str, str]:
        return {
            "class_id": str(self.class_id) if self.class_id is not None else ALL,
            "student_id": str(self.student_id) if self.student_id is not None else ALL,
            "start": format_iso_date(self.start),
            "end": format_iso_date(self.end),
        }


class RecordsService:
    """Attendance records across classes, filtered by class, student and date range."""

    def __init__(self, attendance: AttendanceRepository, *, default_days: int = DEFAULT_RECORDS_DAYS):
        self._attendance = attendance
        self._default_days = int(default_days)

    def default_filters(self, *, today: date) -> RecordFilters:
        return RecordFilters(start=today - timedelta(days=self._default_days), end=today)

    def parse_filters(self, args: Mapping[str, str], *, today: date) -> RecordFilters:
        defaults = self.default_filters(today=today)

        class_s = (args.get("class_id") or ALL).strip()
        student_s = (args.get("student_id") or ALL).strip()
        class_id = None if class_s == ALL else parse_id(class_s, "Class")
        # A student filter only makes sense inside a selected class.
        student_id = None if student_s == ALL or class_id is None else parse_id(student_s, "Student")

        start = parse_iso_date(args["start"]) if args.get("start") else defaults.start
        end = parse_iso_date(args["end"]) if args.get("end") else defaults.end
        if start > end:
            raise ValidationError("Start date must be on or before end date")

        return RecordFilters(start=start, end=end, class_id=class_id, student_id=student_id)

    def list_rows(self, session: StoreSession, filters: RecordFilters) -> Sequence[AttendanceRecordRow]:
        return self._attendance.list_rows(
            session,
            start_date=filters.start,
            end_date=filters.end,
            class_id=filters.class_id,
            student_id=filters.student_id,
        )
