from __future__ import annotations

import importlib
import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .attendance.controller import register as register_attendance
from .common.datetime_utils import now_local
from .common.logging_utils import configure_logging
from .config import get_settings_module
from .container import build_container
from .core.exceptions import ValidationError
from .database.bootstrap import apply_schema, list_tables
from .recap.controller import register as register_recap
from .schedules.controller import register as register_schedules
from .storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    store: Optional[KeyValueStore] = None,
    clock: Callable[[], datetime] = now_local,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = str(getattr(settings, "STORAGE_BACKEND", "mysql")).lower()
    if store is None and backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
        db_config = getattr(settings, "DB_CONFIG")
        apply_schema(db_config)
        logger.info(
            "Schema ready on %s@%s/%s (tables=%d)",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("database"),
            len(list_tables(db_config)),
        )

    container = build_container(settings, store=store, clock=clock)
    app.extensions["siskamling"] = container
    logger.info("settings=%s storage=%s", settings_module, "injected" if store else backend)

    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.before_request
    def refresh_roster():
        container.roster_watcher.refresh()

    register_schedules(app, container)
    register_attendance(app, container)
    register_recap(app, container)

    return app
