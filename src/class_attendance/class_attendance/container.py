from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.board import BoardRegistry
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_MAX_BOARDS, DEFAULT_RECORDS_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .records.service import RecordsService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .users.mysql_teacher_repository import MySQLTeacherRepository
from .users.repository import TeacherRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    teachers_repo: TeacherRepository
    classes_repo: ClassRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    class_service: ClassService
    student_service: StudentService
    attendance_service: AttendanceService
    records_service: RecordsService

    boards: BoardRegistry
    conn: Optional[DatabaseConnection] = None


def wire_container(
    *,
    teachers_repo: TeacherRepository,
    classes_repo: ClassRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
    records_default_days: int = DEFAULT_RECORDS_DAYS,
    max_boards: int = DEFAULT_MAX_BOARDS,
) -> Container:
    """Build services on top of any repository implementations (MySQL or in-memory)."""

    return Container(
        teachers_repo=teachers_repo,
        classes_repo=classes_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(teachers_repo),
        class_service=ClassService(classes_repo),
        student_service=StudentService(students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo),
        records_service=RecordsService(attendance_repo, default_days=records_default_days),
        boards=BoardRegistry(max_boards=max_boards),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    records_default_days: int = DEFAULT_RECORDS_DAYS,
    max_boards: int = DEFAULT_MAX_BOARDS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return wire_container(
        teachers_repo=MySQLTeacherRepository(conn),
        classes_repo=MySQLClassRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
        records_default_days=records_default_days,
        max_boards=max_boards,
    )
