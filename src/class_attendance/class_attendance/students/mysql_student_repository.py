from __future__ import annotations

from typing import Sequence

from ..core.exceptions import NotFoundError
from ..core.session import StoreSession
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Student
from .repository import StudentRepository


def _row_to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        class_id=int(r["class_id"]),
        name=r["name"],
        email=r.get("email") or "",
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _list(self, session: StoreSession, class_id: int, order_by: str) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.student_id, s.class_id, s.name, s.email
                FROM students s
                JOIN classes c ON c.class_id = s.class_id
                WHERE s.class_id=%s AND c.teacher_id=%s
                ORDER BY {order_by}
                """,
                (int(class_id), session.teacher_id),
            )
            return [_row_to_student(r) for r in fetchall(cur)]

    def list_for_class(self, session: StoreSession, class_id: int) -> Sequence[Student]:
        return self._list(session, class_id, "s.created_at ASC, s.student_id ASC")

    def list_for_class_by_name(self, session: StoreSession, class_id: int) -> Sequence[Student]:
        return self._list(session, class_id, "s.name ASC, s.student_id ASC")

    def create(self, session: StoreSession, *, class_id: int, name: str, email: str) -> Student:
        with db_cursor(self._conn_factory) as (_, cur):
            # INSERT ... SELECT so a class owned by someone else inserts nothing.
            cur.execute(
                """
                INSERT INTO students(class_id, name, email)
                SELECT c.class_id, %s, %s
                FROM classes c
                WHERE c.class_id=%s AND c.teacher_id=%s
                """,
                (name, email, int(class_id), session.teacher_id),
            )
            if cur.rowcount == 0:
                raise NotFoundError(f"Class {class_id} not found")
            return Student(student_id=int(cur.lastrowid), class_id=int(class_id), name=name, email=email)

    def delete(self, session: StoreSession, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE s FROM students s
                JOIN classes c ON c.class_id = s.class_id
                WHERE s.student_id=%s AND c.teacher_id=%s
                """,
                (int(student_id), session.teacher_id),
            )
            return cur.rowcount > 0
