"""Write a SQL dump of the class_attendance database to backups/.

Usage: python scripts/backup.py [OUTPUT_DIR]

Shells out to `mysqldump` from the MySQL client tools. The password is
passed through MYSQL_PWD so it does not show up in the process list.
"""

from __future__ import annotations

import importlib
import os
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.class_attendance.class_attendance.database.connection import DBConfig


def dump_command(cfg: DBConfig) -> list[str]:
    return [
        "mysqldump",
        f"--host={cfg.host}",
        f"--port={cfg.port}",
        f"--user={cfg.user}",
        "--single-transaction",
        "--routines",
        cfg.database,
    ]


def main(argv: list[str]) -> None:
    cfg = DBConfig.from_mapping(importlib.import_module(get_settings_module()).DB_CONFIG)
    out_dir = Path(argv[0]) if argv else REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"{cfg.database}_{datetime.now():%Y%m%d_%H%M%S}.sql"

    env = dict(os.environ, MYSQL_PWD=cfg.password)
    try:
        with out_file.open("wb") as f:
            subprocess.run(dump_command(cfg), stdout=f, stderr=subprocess.PIPE, env=env, check=True)
    except FileNotFoundError:
        out_file.unlink(missing_ok=True)
        raise SystemExit("mysqldump is not on PATH; install the MySQL client tools.")
    except subprocess.CalledProcessError as exc:
        out_file.unlink(missing_ok=True)
        raise SystemExit(f"mysqldump failed for {cfg.describe()}: {exc.stderr.decode(errors='replace').strip()}")

    print(f"Backup of {cfg.describe()} written to {out_file}")


if __name__ == "__main__":
    main(sys.argv[1:])
