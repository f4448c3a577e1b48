from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.classes.service import ClassService
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.core.exceptions import NotFoundError, ValidationError
from tests.fakes import OTHER_TEACHER, TEACHER, InMemoryClasses, InMemoryDB


def test_create_trims_and_requires_name():
    svc = ClassService(InMemoryClasses(InMemoryDB()))

    classroom = svc.create(TEACHER, name="  Math  ", description=" Period 1 ")

    assert (classroom.name, classroom.description, classroom.teacher_id) == ("Math", "Period 1", TEACHER.teacher_id)
    with pytest.raises(ValidationError):
        svc.create(TEACHER, name="   ")


def test_summaries_count_students_and_distinct_days():
    db = InMemoryDB()
    math = db.add_class("Math")
    alice = db.add_student(math.class_id, "Alice")
    bob = db.add_student(math.class_id, "Bob")
    db.add_record(math.class_id, alice.student_id, date(2024, 1, 10), AttendanceStatus.PRESENT)
    db.add_record(math.class_id, bob.student_id, date(2024, 1, 10), AttendanceStatus.ABSENT)
    db.add_record(math.class_id, alice.student_id, date(2024, 1, 11), AttendanceStatus.PRESENT)
    db.add_class("Not mine", teacher_id=OTHER_TEACHER.teacher_id)
    svc = ClassService(InMemoryClasses(db))

    summaries = svc.list_summaries(TEACHER)

    assert len(summaries) == 1
    assert (summaries[0].name, summaries[0].student_count, summaries[0].total_class_days) == ("Math", 2, 2)


def test_other_teachers_class_is_invisible():
    db = InMemoryDB()
    foreign = db.add_class("Foreign", teacher_id=OTHER_TEACHER.teacher_id)
    svc = ClassService(InMemoryClasses(db))

    assert svc.find(TEACHER, foreign.class_id) is None
    with pytest.raises(NotFoundError):
        svc.get(TEACHER, foreign.class_id)
    with pytest.raises(NotFoundError):
        svc.update(TEACHER, foreign.class_id, name="Mine now")
    with pytest.raises(NotFoundError):
        svc.delete(TEACHER, foreign.class_id)


def test_update_and_delete_cascade():
    db = InMemoryDB()
    math = db.add_class("Math")
    alice = db.add_student(math.class_id, "Alice")
    db.add_record(math.class_id, alice.student_id, date(2024, 1, 10), AttendanceStatus.PRESENT)
    svc = ClassService(InMemoryClasses(db))

    svc.update(TEACHER, math.class_id, name="Algebra", description="")
    assert svc.get(TEACHER, math.class_id).name == "Algebra"

    svc.delete(TEACHER, math.class_id)
    assert db.classes == {}
    assert db.students == {}
    assert db.attendance == {}


def test_list_classes_sorted_by_name():
    db = InMemoryDB()
    db.add_class("Science")
    db.add_class("Art")
    svc = ClassService(InMemoryClasses(db))

    assert [c.name for c in svc.list_classes(TEACHER)] == ["Art", "Science"]
