from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import optional_email, require_non_empty
from ..core.exceptions import NotFoundError
from ..core.session import StoreSession
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def roster(self, session: StoreSession, class_id: int) -> Sequence[Student]:
        return self._students.list_for_class(session, int(class_id))

    def roster_by_name(self, session: StoreSession, class_id: int) -> Sequence[Student]:
        return self._students.list_for_class_by_name(session, int(class_id))

    def add_student(self, session: StoreSession, *, class_id: int, name: str, email: str = "") -> Student:
        name = require_non_empty(name, "Student name")
        email = optional_email(email, "Student email")
        student = self._students.create(session, class_id=int(class_id), name=name, email=email)
        logger.info("class %s: added student %s", class_id, student.student_id)
        return student

    def delete_student(self, session: StoreSession, student_id: int) -> None:
        # Their attendance rows cascade away with them.
        if not self._students.delete(session, int(student_id)):
            raise NotFoundError(f"Student {student_id} not found")
        logger.info("deleted student %s", student_id)
