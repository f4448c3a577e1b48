from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A roster member; belongs to exactly one class."""

    student_id: int
    class_id: int
    name: str
    email: str = ""

    @property
    def initial(self) -> str:
        return self.name[:1].upper()
