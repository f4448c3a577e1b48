from __future__ import annotations

from typing import Protocol, Sequence

from ..core.session import StoreSession
from .model import Student


class StudentRepository(Protocol):
    def list_for_class(self, session: StoreSession, class_id: int) -> Sequence[Student]:
        """Roster of one class in insertion order (the order the view follows)."""

        raise NotImplementedError

    def list_for_class_by_name(self, session: StoreSession, class_id: int) -> Sequence[Student]:
        raise NotImplementedError

    def create(self, session: StoreSession, *, class_id: int, name: str, email: str) -> Student:
        raise NotImplementedError

    def delete(self, session: StoreSession, student_id: int) -> bool:
        raise NotImplementedError
