from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one persisted mark. Status is PRESENT or ABSENT only."""

    attendance_id: int
    class_id: int
    student_id: int
    day: date
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceEntry:
    """One roster member's status on the viewed day."""

    student_id: int
    day: date
    status: AttendanceStatus = AttendanceStatus.UNMARKED
    record_id: Optional[int] = None

    @classmethod
    def unmarked(cls, student_id: int, day: date) -> "AttendanceEntry":
        return cls(student_id=student_id, day=day)

    @classmethod
    def from_record(cls, record: AttendanceRecord) -> "AttendanceEntry":
        return cls(
            student_id=record.student_id,
            day=record.day,
            status=record.status,
            record_id=record.attendance_id,
        )


@dataclass(frozen=True)
class AttendanceCounts:
    present: int = 0
    absent: int = 0
    unmarked: int = 0

    @property
    def any_marked(self) -> bool:
        return (self.present + self.absent) > 0


@dataclass(frozen=True)
class AttendanceView:
    """Complete per-student attendance for one class on one day.

    Exactly one entry per roster student, in roster order. Immutable: a
    mutation produces a new view, so a failed store call can never leave a
    half-applied one behind.
    """

    class_id: int
    day: date
    entries: tuple[AttendanceEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def entry_for(self, student_id: int) -> Optional[AttendanceEntry]:
        for entry in self.entries:
            if entry.student_id == student_id:
                return entry
        return None

    def with_entry(self, entry: AttendanceEntry) -> "AttendanceView":
        """Swap in ``entry`` for the student it belongs to; unknown students are ignored."""
        entries = tuple(entry if e.student_id == entry.student_id else e for e in self.entries)
        return replace(self, entries=entries)


@dataclass(frozen=True)
class AttendanceRecordRow:
    """Read-model for the records page and CSV export (joined with names)."""

    attendance_id: int
    day: date
    class_id: int
    class_name: str
    student_id: int
    student_name: str
    status: AttendanceStatus
