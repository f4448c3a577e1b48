from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..core.session import StoreSession
from .model import ClassRoom, ClassSummary
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use cases behind the dashboard: list, create, edit and delete classes."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def list_summaries(self, session: StoreSession) -> Sequence[ClassSummary]:
        return self._classes.list_summaries(session)

    def list_classes(self, session: StoreSession) -> Sequence[ClassRoom]:
        return self._classes.list_for_teacher(session)

    def find(self, session: StoreSession, class_id: int) -> Optional[ClassRoom]:
        return self._classes.get(session, int(class_id))

    def get(self, session: StoreSession, class_id: int) -> ClassRoom:
        classroom = self.find(session, class_id)
        if not classroom:
            raise NotFoundError(f"Class {class_id} not found")
        return classroom

    def create(self, session: StoreSession, *, name: str, description: str = "") -> ClassRoom:
        name = require_non_empty(name, "Class name")
        classroom = self._classes.create(session, name=name, description=(description or "").strip())
        logger.info("teacher %s created class %s", session.teacher_id, classroom.class_id)
        return classroom

    def update(self, session: StoreSession, class_id: int, *, name: str, description: str = "") -> None:
        name = require_non_empty(name, "Class name")
        if not self._classes.update(session, int(class_id), name=name, description=(description or "").strip()):
            raise NotFoundError(f"Class {class_id} not found")

    def delete(self, session: StoreSession, class_id: int) -> None:
        # Students and attendance rows go with it (ON DELETE CASCADE).
        if not self._classes.delete(session, int(class_id)):
            raise NotFoundError(f"Class {class_id} not found")
        logger.info("teacher %s deleted class %s", session.teacher_id, class_id)
