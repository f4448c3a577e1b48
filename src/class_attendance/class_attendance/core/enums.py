from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Tri-state attendance mark for one student on one day.

    Only PRESENT and ABSENT are ever stored; UNMARKED means "no row".
    """

    PRESENT = "present"
    ABSENT = "absent"
    UNMARKED = "unmarked"

    @property
    def is_persisted(self) -> bool:
        return self is not AttendanceStatus.UNMARKED


class NotificationVariant(str, Enum):
    SUCCESS = "success"
    DESTRUCTIVE = "destructive"
    WARNING = "warning"
