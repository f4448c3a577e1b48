"""In-memory repositories shared by the service and API tests.

All four repositories sit on one ``InMemoryDB`` so cascades and
teacher scoping behave like the MySQL schema.
"""
from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord, AttendanceRecordRow
from src.class_attendance.class_attendance.classes.model import ClassRoom, ClassSummary
from src.class_attendance.class_attendance.container import wire_container
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import NotFoundError, StoreError
from src.class_attendance.class_attendance.core.session import StoreSession
from src.class_attendance.class_attendance.students.model import Student
from src.class_attendance.class_attendance.users.model import Teacher

TEACHER = StoreSession(teacher_id=1, full_name="Ada Teacher", email="ada@example.com")
OTHER_TEACHER = StoreSession(teacher_id=2, full_name="Other Teacher", email="other@example.com")


class InMemoryDB:
    def __init__(self):
        self.teachers: dict[int, Teacher] = {}
        self.classes: dict[int, ClassRoom] = {}
        self.students: dict[int, Student] = {}
        self.attendance: dict[int, AttendanceRecord] = {}
        self._ids = {"teacher": 0, "class": 0, "student": 0, "attendance": 0}

    def next_id(self, kind: str) -> int:
        self._ids[kind] += 1
        return self._ids[kind]

    # ---- seeding helpers ----

    def add_class(self, name: str, *, teacher_id: int = TEACHER.teacher_id, description: str = "") -> ClassRoom:
        classroom = ClassRoom(class_id=self.next_id("class"), teacher_id=teacher_id, name=name, description=description)
        self.classes[classroom.class_id] = classroom
        return classroom

    def add_student(self, class_id: int, name: str, email: str = "") -> Student:
        student = Student(student_id=self.next_id("student"), class_id=class_id, name=name, email=email)
        self.students[student.student_id] = student
        return student

    def add_record(self, class_id: int, student_id: int, day: date, status: AttendanceStatus) -> AttendanceRecord:
        record = AttendanceRecord(
            attendance_id=self.next_id("attendance"),
            class_id=class_id,
            student_id=student_id,
            day=day,
            status=status,
        )
        self.attendance[record.attendance_id] = record
        return record

    # ---- ownership ----

    def owns_class(self, session: StoreSession, class_id: int) -> bool:
        classroom = self.classes.get(int(class_id))
        return classroom is not None and classroom.teacher_id == session.teacher_id

    def owns_student(self, session: StoreSession, student_id: int) -> bool:
        student = self.students.get(int(student_id))
        return student is not None and self.owns_class(session, student.class_id)

    def drop_student(self, student_id: int) -> None:
        self.students.pop(student_id, None)
        for rid in [r.attendance_id for r in self.attendance.values() if r.student_id == student_id]:
            del self.attendance[rid]


class InMemoryTeachers:
    def __init__(self, db: InMemoryDB):
        self._db = db

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self._db.teachers.get(int(teacher_id))

    def get_by_email(self, email: str) -> Optional[Teacher]:
        for teacher in self._db.teachers.values():
            if teacher.email == email:
                return teacher
        return None

    def create(self, *, full_name: str, email: str, password_hash: str) -> int:
        teacher_id = self._db.next_id("teacher")
        self._db.teachers[teacher_id] = Teacher(
            teacher_id=teacher_id, full_name=full_name, email=email, password_hash=password_hash
        )
        return teacher_id


class InMemoryClasses:
    def __init__(self, db: InMemoryDB):
        self._db = db
        self.fail = False

    def _check(self):
        if self.fail:
            raise StoreError("classes store unavailable")

    def list_summaries(self, session: StoreSession):
        self._check()
        summaries = []
        for c in self._db.classes.values():
            if c.teacher_id != session.teacher_id:
                continue
            students = [s for s in self._db.students.values() if s.class_id == c.class_id]
            days = {r.day for r in self._db.attendance.values() if r.class_id == c.class_id}
            summaries.append(ClassSummary(classroom=c, student_count=len(students), total_class_days=len(days)))
        return summaries

    def list_for_teacher(self, session: StoreSession):
        self._check()
        return sorted(
            (c for c in self._db.classes.values() if c.teacher_id == session.teacher_id),
            key=lambda c: c.name,
        )

    def get(self, session: StoreSession, class_id: int):
        self._check()
        return self._db.classes.get(int(class_id)) if self._db.owns_class(session, class_id) else None

    def create(self, session: StoreSession, *, name: str, description: str) -> ClassRoom:
        self._check()
        return self._db.add_class(name, teacher_id=session.teacher_id, description=description)

    def update(self, session: StoreSession, class_id: int, *, name: str, description: str) -> bool:
        self._check()
        if not self._db.owns_class(session, class_id):
            return False
        self._db.classes[int(class_id)] = replace(self._db.classes[int(class_id)], name=name, description=description)
        return True

    def delete(self, session: StoreSession, class_id: int) -> bool:
        self._check()
        if not self._db.owns_class(session, class_id):
            return False
        del self._db.classes[int(class_id)]
        for sid in [s.student_id for s in self._db.students.values() if s.class_id == int(class_id)]:
            self._db.drop_student(sid)
        return True


class InMemoryStudents:
    def __init__(self, db: InMemoryDB):
        self._db = db

    def list_for_class(self, session: StoreSession, class_id: int):
        if not self._db.owns_class(session, class_id):
            return []
        return [s for s in self._db.students.values() if s.class_id == int(class_id)]

    def list_for_class_by_name(self, session: StoreSession, class_id: int):
        return sorted(self.list_for_class(session, class_id), key=lambda s: s.name)

    def create(self, session: StoreSession, *, class_id: int, name: str, email: str) -> Student:
        if not self._db.owns_class(session, class_id):
            raise NotFoundError(f"Class {class_id} not found")
        return self._db.add_student(int(class_id), name, email)

    def delete(self, session: StoreSession, student_id: int) -> bool:
        if not self._db.owns_student(session, student_id):
            return False
        self._db.drop_student(int(student_id))
        return True


class InMemoryAttendance:
    """Counts calls per method; ``fail_on`` maps a method name to the error it raises."""

    def __init__(self, db: InMemoryDB):
        self._db = db
        self.calls: list[str] = []
        self.fail_on: dict[str, Exception] = {}

    def _enter(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise self.fail_on[name]

    def _owned(self, session: StoreSession, record_id: int) -> Optional[AttendanceRecord]:
        record = self._db.attendance.get(int(record_id))
        if record is None or not self._db.owns_class(session, record.class_id):
            return None
        return record

    def list_for_class_and_date(self, session: StoreSession, class_id: int, day: date):
        self._enter("list_for_class_and_date")
        if not self._db.owns_class(session, class_id):
            return []
        return [r for r in self._db.attendance.values() if r.class_id == int(class_id) and r.day == day]

    def create(self, session: StoreSession, *, class_id: int, student_id: int, day: date, status: AttendanceStatus):
        self._enter("create")
        if not self._db.owns_student(session, student_id):
            raise NotFoundError(f"Student {student_id} not found")
        if any(r.student_id == student_id and r.day == day for r in self._db.attendance.values()):
            raise StoreError("Duplicate entry for (student, day)")
        return self._db.add_record(int(class_id), int(student_id), day, status)

    def update_status(self, session: StoreSession, record_id: int, status: AttendanceStatus):
        self._enter("update_status")
        record = self._owned(session, record_id)
        if record is None:
            raise NotFoundError(f"Attendance record {record_id} not found")
        updated = replace(record, status=status)
        self._db.attendance[record.attendance_id] = updated
        return updated

    def delete(self, session: StoreSession, record_id: int) -> bool:
        self._enter("delete")
        record = self._owned(session, record_id)
        if record is None:
            return False
        del self._db.attendance[record.attendance_id]
        return True

    def list_rows(self, session: StoreSession, *, start_date, end_date, class_id=None, student_id=None):
        self._enter("list_rows")
        rows = []
        for r in self._db.attendance.values():
            if not self._db.owns_class(session, r.class_id):
                continue
            if not (start_date <= r.day <= end_date):
                continue
            if class_id is not None and r.class_id != class_id:
                continue
            if student_id is not None and r.student_id != student_id:
                continue
            rows.append(
                AttendanceRecordRow(
                    attendance_id=r.attendance_id,
                    day=r.day,
                    class_id=r.class_id,
                    class_name=self._db.classes[r.class_id].name,
                    student_id=r.student_id,
                    student_name=self._db.students[r.student_id].name,
                    status=r.status,
                )
            )
        rows.sort(key=lambda row: (row.class_name, row.student_name))
        rows.sort(key=lambda row: row.day, reverse=True)
        return rows


def in_memory_container(db: Optional[InMemoryDB] = None, **kwargs):
    db = db or InMemoryDB()
    return wire_container(
        teachers_repo=InMemoryTeachers(db),
        classes_repo=InMemoryClasses(db),
        students_repo=InMemoryStudents(db),
        attendance_repo=InMemoryAttendance(db),
        **kwargs,
    )
