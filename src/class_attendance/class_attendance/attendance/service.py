from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..core.session import StoreSession
from ..students.model import Student
from ..students.repository import StudentRepository
from .merger import build_view
from .model import AttendanceEntry, AttendanceView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: object) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}")


class AttendanceService:
    """Builds a class's daily view and writes tri-state edits back to the store."""

    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def load_view(
        self,
        session: StoreSession,
        class_id: int,
        day: date,
        *,
        roster: Optional[Sequence[Student]] = None,
    ) -> AttendanceView:
        if roster is None:
            roster = self._students.list_for_class(session, int(class_id))
        records = self._attendance.list_for_class_and_date(session, int(class_id), day)
        return build_view(roster, records, class_id=int(class_id), day=day)

    def set_status(
        self,
        session: StoreSession,
        view: AttendanceView,
        student_id: int,
        target: AttendanceStatus,
    ) -> AttendanceView:
        """Persist ``target`` for one student and return the patched view.

        | current            | target             | store call |
        |--------------------|--------------------|------------|
        | unmarked (no row)  | present / absent   | create     |
        | unmarked (no row)  | unmarked           | none       |
        | present / absent   | present / absent   | update     |
        | present / absent   | unmarked           | delete     |

        Store errors propagate unchanged and ``view`` is never modified, so
        on failure the caller still holds the last confirmed state.
        """

        current = view.entry_for(int(student_id))
        if current is None:
            raise ValidationError(f"Student {student_id} is not on this roster")

        target = parse_status(target)

        if current.record_id is None:
            if not target.is_persisted:
                return view
            record = self._attendance.create(
                session,
                class_id=view.class_id,
                student_id=current.student_id,
                day=view.day,
                status=target,
            )
            logger.debug("created attendance %s (%s)", record.attendance_id, target.value)
            return view.with_entry(AttendanceEntry.from_record(record))

        if not target.is_persisted:
            if not self._attendance.delete(session, current.record_id):
                raise NotFoundError(f"Attendance record {current.record_id} not found")
            logger.debug("deleted attendance %s", current.record_id)
            return view.with_entry(AttendanceEntry.unmarked(current.student_id, view.day))

        # Same-status updates still go to the store; harmless and keeps the
        # view aligned with whatever the server holds.
        record = self._attendance.update_status(session, current.record_id, target)
        logger.debug("updated attendance %s -> %s", record.attendance_id, record.status.value)
        return view.with_entry(AttendanceEntry.from_record(record))
