from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassRoom:
    class_id: int
    teacher_id: int
    name: str
    description: str = ""


@dataclass(frozen=True)
class ClassSummary:
    """Read-model for the dashboard cards."""

    classroom: ClassRoom
    student_count: int
    total_class_days: int

    @property
    def class_id(self) -> int:
        return self.classroom.class_id

    @property
    def name(self) -> str:
        return self.classroom.name

    @property
    def description(self) -> str:
        return self.classroom.description
