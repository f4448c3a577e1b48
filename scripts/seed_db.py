from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.database.bootstrap import (
    DEMO_TEACHER_EMAIL,
    DEMO_TEACHER_PASSWORD,
    apply_seed_sql,
    ensure_demo_teacher,
)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_teacher(db_config)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )
    print(f"Demo login: {DEMO_TEACHER_EMAIL} / {DEMO_TEACHER_PASSWORD}")


if __name__ == "__main__":
    main()
