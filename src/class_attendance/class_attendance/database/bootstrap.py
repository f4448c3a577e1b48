from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

logger = logging.getLogger(__name__)

DEMO_TEACHER_EMAIL = "demo@example.com"
DEMO_TEACHER_PASSWORD = "teacher123"


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "class_attendance")),
    )


def _connect(target: DBTarget, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable whatever DB_NAME points at.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Splits on ';' outside quotes; '--' comment lines are dropped first.
    sql = "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))
    buf: list[str] = []
    quote = ""
    escape = False

    for ch in sql:
        buf.append(ch)
        if escape:
            escape = False
        elif ch == "\\":
            escape = True
        elif ch in ("'", '"'):
            if not quote:
                quote = ch
            elif quote == ch:
                quote = ""
        elif ch == ";" and not quote:
            stmt = "".join(buf[:-1]).strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _run_sql_file(db_config: dict, path: str | Path) -> None:
    target = _as_target(db_config)
    sql = _strip_create_db_and_use(Path(path).read_text(encoding="utf-8"))
    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _run_sql_file(db_config, schema_path)
    logger.info("schema applied from %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _run_sql_file(db_config, seed_path)
    logger.info("seed applied from %s", seed_path)


def ensure_demo_teacher(db_config: dict) -> None:
    """Give the seeded demo teacher a real password hash.

    seed.sql inserts the row with a placeholder hash that can never match.
    """

    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor(dictionary=True)
        password_hash = generate_password_hash(DEMO_TEACHER_PASSWORD)
        cur.execute("SELECT teacher_id FROM teachers WHERE email=%s", (DEMO_TEACHER_EMAIL,))
        if cur.fetchone():
            cur.execute(
                "UPDATE teachers SET password_hash=%s WHERE email=%s",
                (password_hash, DEMO_TEACHER_EMAIL),
            )
        else:
            cur.execute(
                "INSERT INTO teachers (full_name, email, password_hash) VALUES (%s, %s, %s)",
                ("Demo Teacher", DEMO_TEACHER_EMAIL, password_hash),
            )
        conn.commit()
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(_as_target(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
