"""Create the class_attendance tables on the database selected by APP_ENV.

Safe to re-run: every table in database/schema.sql is CREATE TABLE IF NOT EXISTS.
Run scripts/seed_db.py afterwards for the demo teacher and class.
"""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.database.bootstrap import apply_schema, list_tables
from src.class_attendance.class_attendance.database.connection import DBConfig

EXPECTED_TABLES = ("teachers", "classes", "students", "attendance")


def main() -> None:
    db_config = dict(importlib.import_module(get_settings_module()).DB_CONFIG)
    target = DBConfig.from_mapping(db_config).describe()

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")

    present = set(list_tables(db_config))
    missing = [t for t in EXPECTED_TABLES if t not in present]
    if missing:
        raise SystemExit(f"Schema applied to {target} but tables are missing: {', '.join(missing)}")
    print(f"Schema ready on {target}: {', '.join(EXPECTED_TABLES)}")


if __name__ == "__main__":
    main()
