from __future__ import annotations

from pathlib import Path

from src.class_attendance.class_attendance.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use

REPO_ROOT = Path(__file__).resolve().parents[2]


def test_split_ignores_semicolons_in_quotes_and_comments():
    sql = """
    -- leading comment; with a semicolon
    INSERT INTO classes (name) VALUES ('a;b');
    INSERT INTO classes (name) VALUES ("it\\'s; fine")
    """

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO classes (name) VALUES ('a;b')",
        "INSERT INTO classes (name) VALUES (\"it\\'s; fine\")",
    ]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS class_attendance;\nUSE class_attendance;\nSELECT 1;"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["SELECT 1"]


def test_schema_file_defines_all_tables():
    sql = _strip_create_db_and_use((REPO_ROOT / "database" / "schema.sql").read_text(encoding="utf-8"))
    statements = list(_iter_sql_statements(sql))

    created = [s.split("(")[0].split()[-1].strip("`") for s in statements if s.upper().startswith("CREATE TABLE")]
    assert created == ["teachers", "classes", "students", "attendance"]
    assert all("USE " not in s.upper() for s in statements)
