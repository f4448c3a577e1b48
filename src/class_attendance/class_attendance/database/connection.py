from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "DBConfig":
        """Build from a settings module's DB_CONFIG dict."""
        return cls(
            host=str(data.get("host") or "localhost"),
            port=int(data.get("port") or 3306),
            user=str(data.get("user") or "root"),
            password=str(data.get("password") or ""),
            database=str(data.get("database") or "class_attendance"),
        )

    def describe(self) -> str:
        # Log-safe: never includes the password.
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Process-wide connection factory.

    Each repository operation opens its own short-lived connection; the
    factory only remembers where to connect.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        # A different config (e.g. tests switching databases) replaces the factory.
        if cls._instance is None or cls._instance.config != config:
            cls._instance = cls(config)
        return cls._instance

    def connect(self):
        cfg = self._config
        return mysql.connector.connect(
            host=cfg.host, port=cfg.port, user=cfg.user, password=cfg.password, database=cfg.database
        )
