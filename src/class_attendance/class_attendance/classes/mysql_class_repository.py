from __future__ import annotations

from typing import Optional, Sequence

from ..core.session import StoreSession
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ClassRoom, ClassSummary
from .repository import ClassRepository


def _row_to_class(r: dict) -> ClassRoom:
    return ClassRoom(
        class_id=int(r["class_id"]),
        teacher_id=int(r["teacher_id"]),
        name=r["name"],
        description=r.get("description") or "",
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_summaries(self, session: StoreSession) -> Sequence[ClassSummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    c.class_id, c.teacher_id, c.name, c.description,
                    (SELECT COUNT(*) FROM students s WHERE s.class_id = c.class_id) AS student_count,
                    (SELECT COUNT(DISTINCT a.att_date) FROM attendance a WHERE a.class_id = c.class_id)
                        AS total_class_days
                FROM classes c
                WHERE c.teacher_id=%s
                ORDER BY c.created_at ASC, c.class_id ASC
                """,
                (session.teacher_id,),
            )
            return [
                ClassSummary(
                    classroom=_row_to_class(r),
                    student_count=int(r.get("student_count") or 0),
                    total_class_days=int(r.get("total_class_days") or 0),
                )
                for r in fetchall(cur)
            ]

    def list_for_teacher(self, session: StoreSession) -> Sequence[ClassRoom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, teacher_id, name, description
                FROM classes
                WHERE teacher_id=%s
                ORDER BY name ASC
                """,
                (session.teacher_id,),
            )
            return [_row_to_class(r) for r in fetchall(cur)]

    def get(self, session: StoreSession, class_id: int) -> Optional[ClassRoom]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, teacher_id, name, description
                FROM classes
                WHERE class_id=%s AND teacher_id=%s
                """,
                (int(class_id), session.teacher_id),
            )
            r = fetchone(cur)
            return _row_to_class(r) if r else None

    def create(self, session: StoreSession, *, name: str, description: str) -> ClassRoom:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO classes(teacher_id, name, description) VALUES(%s,%s,%s)",
                (session.teacher_id, name, description),
            )
            return ClassRoom(
                class_id=int(cur.lastrowid),
                teacher_id=session.teacher_id,
                name=name,
                description=description,
            )

    def update(self, session: StoreSession, class_id: int, *, name: str, description: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE classes
                SET name=%s, description=%s
                WHERE class_id=%s AND teacher_id=%s
                """,
                (name, description, int(class_id), session.teacher_id),
            )
            # MySQL reports 0 changed rows when the values are identical, so
            # fall back to an existence check.
            if cur.rowcount > 0:
                return True
            cur.execute(
                "SELECT 1 AS found FROM classes WHERE class_id=%s AND teacher_id=%s",
                (int(class_id), session.teacher_id),
            )
            return fetchone(cur) is not None

    def delete(self, session: StoreSession, class_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM classes WHERE class_id=%s AND teacher_id=%s",
                (int(class_id), session.teacher_id),
            )
            return cur.rowcount > 0
