"""Settings shared by every environment, read from the process environment."""
import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def db_config(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "class_attendance"),
    }


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))

# Attendance records page: default look-back window in days.
RECORDS_DEFAULT_DAYS = int(os.getenv("RECORDS_DEFAULT_DAYS", "30"))

# Upper bound on in-memory attendance boards (one per browser session).
MAX_BOARDS = int(os.getenv("MAX_BOARDS", "512"))
