from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..core.session import StoreSession
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceRecordRow
from .repository import AttendanceRepository


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        class_id=int(r["class_id"]),
        student_id=int(r["student_id"]),
        day=r["att_date"],
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_class_and_date(self, session: StoreSession, class_id: int, day: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT a.attendance_id, a.class_id, a.student_id, a.att_date, a.status
                FROM attendance a
                JOIN classes c ON c.class_id = a.class_id
                WHERE a.class_id=%s AND a.att_date=%s AND c.teacher_id=%s
                """,
                (int(class_id), day, session.teacher_id),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def _get(self, cur, session: StoreSession, record_id: int) -> Optional[AttendanceRecord]:
        cur.execute(
            """
            SELECT a.attendance_id, a.class_id, a.student_id, a.att_date, a.status
            FROM attendance a
            JOIN classes c ON c.class_id = a.class_id
            WHERE a.attendance_id=%s AND c.teacher_id=%s
            """,
            (int(record_id), session.teacher_id),
        )
        r = fetchone(cur)
        return _row_to_record(r) if r else None

    def create(
        self,
        session: StoreSession,
        *,
        class_id: int,
        student_id: int,
        day: date,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance(class_id, student_id, att_date, status)
                SELECT s.class_id, s.student_id, %s, %s
                FROM students s
                JOIN classes c ON c.class_id = s.class_id
                WHERE s.student_id=%s AND s.class_id=%s AND c.teacher_id=%s
                """,
                (day, status.value, int(student_id), int(class_id), session.teacher_id),
            )
            if cur.rowcount == 0:
                raise NotFoundError(f"Student {student_id} is not in class {class_id}")

            record = self._get(cur, session, int(cur.lastrowid))
            if record is None:
                raise NotFoundError("Created attendance row could not be read back")
            return record

    def update_status(self, session: StoreSession, record_id: int, status: AttendanceStatus) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance a
                JOIN classes c ON c.class_id = a.class_id
                SET a.status=%s
                WHERE a.attendance_id=%s AND c.teacher_id=%s
                """,
                (status.value, int(record_id), session.teacher_id),
            )
            # rowcount is 0 for a same-status update too; read back to tell
            # "unchanged" from "gone".
            record = self._get(cur, session, record_id)
            if record is None:
                raise NotFoundError(f"Attendance record {record_id} not found")
            return record

    def delete(self, session: StoreSession, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                DELETE a FROM attendance a
                JOIN classes c ON c.class_id = a.class_id
                WHERE a.attendance_id=%s AND c.teacher_id=%s
                """,
                (int(record_id), session.teacher_id),
            )
            return cur.rowcount > 0

    def list_rows(
        self,
        session: StoreSession,
        *,
        start_date: date,
        end_date: date,
        class_id: Optional[int] = None,
        student_id: Optional[int] = None,
    ) -> Sequence[AttendanceRecordRow]:
        clauses = ["c.teacher_id=%s", "a.att_date BETWEEN %s AND %s"]
        params: list[object] = [session.teacher_id, start_date, end_date]

        if class_id is not None:
            clauses.append("a.class_id=%s")
            params.append(int(class_id))
        if student_id is not None:
            clauses.append("a.student_id=%s")
            params.append(int(student_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.attendance_id, a.att_date, a.status,
                    c.class_id, c.name AS class_name,
                    s.student_id, s.name AS student_name
                FROM attendance a
                JOIN classes c ON c.class_id = a.class_id
                JOIN students s ON s.student_id = a.student_id
                WHERE {where}
                ORDER BY a.att_date DESC, c.name ASC, s.name ASC
                """,
                tuple(params),
            )
            return [
                AttendanceRecordRow(
                    attendance_id=int(r["attendance_id"]),
                    day=r["att_date"],
                    class_id=int(r["class_id"]),
                    class_name=r["class_name"],
                    student_id=int(r["student_id"]),
                    student_name=r["student_name"],
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]
