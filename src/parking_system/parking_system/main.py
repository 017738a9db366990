from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, request

from config import get_settings_module

from .container import build_container, build_store
from .database.bootstrap import apply_schema, list_tables
from .database.kv_store import KeyValueStore
from .parking.controller import register as register_parking
from .payment.controller import register as register_payment

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(app: Flask, level_name: str) -> None:
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
    app.logger.setLevel(level)


def _install_http_hooks(app: Flask) -> None:
    @app.after_request
    def add_cors_and_log(response):
        response.headers["Access-Control-Allow-Origin"] = app.config["CORS_ORIGIN"]
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, PUT, DELETE, OPTIONS"
        response.headers["Access-Control-Expose-Headers"] = "Content-Length"
        response.headers["Access-Control-Max-Age"] = "600"
        app.logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response


def create_app(settings_module: Optional[str] = None, *, store: Optional[KeyValueStore] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["CORS_ORIGIN"] = getattr(settings, "CORS_ORIGIN", "*")
    app.config["QRIS_IMAGE_PATH"] = getattr(settings, "QRIS_IMAGE_PATH", None)
    app.config["QRIS_PAYLOAD"] = getattr(settings, "QRIS_PAYLOAD", "PARKING_PAYMENT")
    _configure_logging(app, getattr(settings, "LOG_LEVEL", "INFO"))

    backend = str(getattr(settings, "STORE_BACKEND", "mysql"))
    db_config = getattr(settings, "DB_CONFIG", None)

    if store is None:
        if backend == "mysql" and bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=SCHEMA_PATH)
            app.logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
        store = build_store(backend=backend, db_config=db_config)

    if backend == "mysql" and db_config:
        app.logger.info(
            "settings=%s store=mysql db=%s@%s:%s/%s",
            settings_module, db_config.get("user"), db_config.get("host"),
            db_config.get("port", 3306), db_config.get("database"),
        )
    else:
        app.logger.info("settings=%s store=%s", settings_module, backend)

    container = build_container(store=store)
    app.extensions["parking_container"] = container

    _install_http_hooks(app)
    register_parking(app, container)
    register_payment(app)

    return app
