from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .database.bootstrap import apply_schema
from .qr.controller import register as register_qr
from .sessions.controller import register as register_sessions
from .stats.controller import register as register_stats
from .users.controller import register as register_users

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    app.logger.setLevel(getattr(settings, "LOG_LEVEL", "INFO"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        app.logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(db_config=db_config)

        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(container.conn, schema_path=SCHEMA_PATH)

    app.extensions["qr_attendance"] = container

    register_users(app, container)
    register_attendance(app, container)
    register_sessions(app, container)
    register_stats(app, container)
    register_qr(app, container)

    return app


def main() -> None:
    create_app().run()


if __name__ == "__main__":
    main()
