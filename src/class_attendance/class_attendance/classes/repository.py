from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.session import StoreSession
from .model import ClassRoom, ClassSummary


class ClassRepository(Protocol):
    def list_summaries(self, session: StoreSession) -> Sequence[ClassSummary]:
        """Classes of the session's teacher with roster size and distinct attendance days."""

        raise NotImplementedError

    def list_for_teacher(self, session: StoreSession) -> Sequence[ClassRoom]:
        """Ordered by name (records page filter)."""

        raise NotImplementedError

    def get(self, session: StoreSession, class_id: int) -> Optional[ClassRoom]:
        raise NotImplementedError

    def create(self, session: StoreSession, *, name: str, description: str) -> ClassRoom:
        raise NotImplementedError

    def update(self, session: StoreSession, class_id: int, *, name: str, description: str) -> bool:
        raise NotImplementedError

    def delete(self, session: StoreSession, class_id: int) -> bool:
        raise NotImplementedError
