from __future__ import annotations

import mysql.connector
import pytest

from src.class_attendance.class_attendance.core.exceptions import StoreError, ValidationError
from src.class_attendance.class_attendance.database.connection import DBConfig
from src.class_attendance.class_attendance.database.mysql_base import db_cursor


class FakeCursor:
    def __init__(self, error=None):
        self.error = error
        self.closed = False

    def execute(self, sql, params=None):
        if self.error:
            raise self.error

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self, error=None):
        self.cursor_obj = FakeCursor(error)
        self.committed = self.rolled_back = self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, connect_error=None):
        self.conn = conn
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error:
            raise self.connect_error
        return self.conn


def test_success_commits_and_closes():
    conn = FakeConn()

    with db_cursor(FakeFactory(conn)) as (_, cur):
        cur.execute("SELECT 1")

    assert conn.committed and conn.closed and cur.closed
    assert not conn.rolled_back


def test_driver_error_becomes_store_error_with_rollback():
    conn = FakeConn(mysql.connector.Error("Duplicate entry"))

    with pytest.raises(StoreError):
        with db_cursor(FakeFactory(conn)) as (_, cur):
            cur.execute("INSERT ...")

    assert conn.rolled_back and conn.closed
    assert not conn.committed


def test_connect_error_becomes_store_error():
    with pytest.raises(StoreError):
        with db_cursor(FakeFactory(connect_error=mysql.connector.Error("refused"))):
            pass


def test_other_errors_propagate_unchanged():
    conn = FakeConn()

    with pytest.raises(ValidationError):
        with db_cursor(FakeFactory(conn)):
            raise ValidationError("bad")

    assert conn.rolled_back and conn.closed


def test_db_config_from_mapping_and_describe():
    cfg = DBConfig.from_mapping({"host": "db", "port": "3307", "user": "app", "password": "s3cret", "database": "att"})

    assert cfg == DBConfig(host="db", port=3307, user="app", password="s3cret", database="att")
    assert cfg.describe() == "app@db:3307/att"
    assert "s3cret" not in cfg.describe()
