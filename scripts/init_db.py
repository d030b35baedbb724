"""Create the attendance table in the database selected by APP_ENV."""

from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module
from qr_attendance.database.bootstrap import apply_schema
from qr_attendance.database.connection import DatabaseConnection, DBConfig
from qr_attendance.main import SCHEMA_PATH

logger = logging.getLogger("init_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    load_dotenv(override=False)

    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))

    count = apply_schema(DatabaseConnection(config), schema_path=SCHEMA_PATH)
    logger.info("schema ready on %s@%s:%s/%s (%d statements)", config.user, config.host, config.port, config.database, count)


if __name__ == "__main__":
    main()
