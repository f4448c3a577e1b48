from __future__ import annotations

from scripts.backup import dump_command
from src.class_attendance.class_attendance.database.connection import DBConfig


def test_backup_command_keeps_password_off_the_command_line():
    cfg = DBConfig(host="db", port=3307, user="app", password="s3cret", database="class_attendance")

    cmd = dump_command(cfg)

    assert cmd[0] == "mysqldump"
    assert "--port=3307" in cmd
    assert cmd[-1] == "class_attendance"
    assert not any("s3cret" in part for part in cmd)
