"""Example: drive the service layer directly, without Flask.

Logs in as the seeded demo teacher and prints today's attendance for each
of their classes.
"""

import importlib

from config import get_settings_module

from src.class_attendance.class_attendance.attendance.merger import count_statuses
from src.class_attendance.class_attendance.common.datetime_utils import today_local
from src.class_attendance.class_attendance.container import build_container
from src.class_attendance.class_attendance.database.bootstrap import DEMO_TEACHER_EMAIL, DEMO_TEACHER_PASSWORD


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    session = container.auth_service.authenticate(DEMO_TEACHER_EMAIL, DEMO_TEACHER_PASSWORD)

    day = today_local()
    for classroom in container.class_service.list_classes(session):
        view = container.attendance_service.load_view(session, classroom.class_id, day)
        counts = count_statuses(view)
        print(f"{classroom.name} {day}: present={counts.present} absent={counts.absent} unmarked={counts.unmarked}")


if __name__ == "__main__":
    main()
