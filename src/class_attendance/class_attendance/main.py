from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .classes.controller import register as register_classes
from .container import Container, build_container
from .core.constants import DEFAULT_MAX_BOARDS, DEFAULT_RECORDS_DAYS
from .database.bootstrap import apply_schema, apply_seed_sql, ensure_demo_teacher, list_tables
from .database.connection import DBConfig
from .records.controller import register as register_records
from .site.controller import register as register_site
from .students.controller import register as register_students
from .users.controller import register as register_users

REPO_ROOT = Path(__file__).resolve().parents[3]


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    logging.getLogger().setLevel(level)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", 7)))

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    app.logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            ensure_demo_teacher(db_config)
            app.logger.info("demo seed ready")

        container = build_container(
            db_config=db_config,
            records_default_days=int(getattr(settings, "RECORDS_DEFAULT_DAYS", DEFAULT_RECORDS_DAYS)),
            max_boards=int(getattr(settings, "MAX_BOARDS", DEFAULT_MAX_BOARDS)),
        )

    app.extensions["class_attendance"] = container

    register_site(app, container)
    register_users(app, container)
    register_classes(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_records(app, container)

    @app.errorhandler(404)
    def not_found(_error):
        return render_template("404.html"), 404

    return app
