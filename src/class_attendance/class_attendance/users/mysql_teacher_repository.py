from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import Teacher
from .repository import TeacherRepository


def _row_to_teacher(r: dict) -> Teacher:
    return Teacher(
        teacher_id=int(r["teacher_id"]),
        full_name=r["full_name"],
        email=r["email"],
        password_hash=r["password_hash"],
    )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT teacher_id, full_name, email, password_hash FROM teachers WHERE teacher_id=%s",
                (int(teacher_id),),
            )
            r = fetchone(cur)
            return _row_to_teacher(r) if r else None

    def get_by_email(self, email: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT teacher_id, full_name, email, password_hash FROM teachers WHERE email=%s",
                (email,),
            )
            r = fetchone(cur)
            return _row_to_teacher(r) if r else None

    def create(self, *, full_name: str, email: str, password_hash: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO teachers(full_name, email, password_hash) VALUES(%s,%s,%s)",
                (full_name, email, password_hash),
            )
            return int(cur.lastrowid)
