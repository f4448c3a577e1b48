from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from ..core.session import StoreSession
from .model import AttendanceRecord, AttendanceRecordRow


class AttendanceRepository(Protocol):
    def list_for_class_and_date(self, session: StoreSession, class_id: int, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        session: StoreSession,
        *,
        class_id: int,
        student_id: int,
        day: date,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        """Insert a row; raises StoreError on failure (e.g. a duplicate (student, day))."""

        raise NotImplementedError

    def update_status(self, session: StoreSession, record_id: int, status: AttendanceStatus) -> AttendanceRecord:
        """Return the row as stored after the update; NotFoundError if it is gone."""

        raise NotImplementedError

    def delete(self, session: StoreSession, record_id: int) -> bool:
        raise NotImplementedError

    def list_rows(
        self,
        session: StoreSession,
        *,
        start_date: date,
        end_date: date,
        class_id: Optional[int] = None,
        student_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecordRow]:
        """Records joined with class/student names, newest day first."""

        raise NotImplementedError
