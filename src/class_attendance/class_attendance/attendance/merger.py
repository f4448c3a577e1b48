from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from ..core.enums import AttendanceStatus
from ..students.model import Student
from .model import AttendanceCounts, AttendanceEntry, AttendanceRecord, AttendanceView


def build_view(
    roster: Sequence[Student],
    records: Iterable[AttendanceRecord],
    *,
    class_id: int,
    day: date,
) -> AttendanceView:
    """Left-join the roster against the day's records.

    ``records`` must already be scoped to ``class_id`` and ``day``. Students
    without a record come out UNMARKED; records for students who are no
    longer on the roster are dropped. Output follows roster order.
    """

    drafts: dict[int, AttendanceEntry] = {}
    for student in roster:
        drafts.setdefault(student.student_id, AttendanceEntry.unmarked(student.student_id, day))

    for record in records:
        if record.student_id in drafts:
            drafts[record.student_id] = AttendanceEntry.from_record(record)

    # dicts keep insertion order, i.e. roster order with duplicates collapsed
    return AttendanceView(class_id=class_id, day=day, entries=tuple(drafts.values()))


def count_statuses(view: AttendanceView) -> AttendanceCounts:
    present = absent = unmarked = 0
    for entry in view.entries:
        if entry.status is AttendanceStatus.PRESENT:
            present += 1
        elif entry.status is AttendanceStatus.ABSENT:
            absent += 1
        else:
            unmarked += 1
    return AttendanceCounts(present=present, absent=absent, unmarked=unmarked)
