from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .audit.controller import register as register_audit
from .common.datetime_utils import parse_iso_date
from .container import Container, build_container
from .core.exceptions import StoreUnavailableError
from .database.bootstrap import apply_schema, list_tables
from .roster.controller import register as register_roster
from .seeding.controller import register as register_seeding
from .statuses.controller import register as register_statuses

logger = logging.getLogger("wfh_tracker")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(container: Optional[Container] = None) -> Flask:
    """Build the Flask app.

    When ``container`` is given (tests), schema/seed bootstrapping is skipped.
    """

    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            roster_path=getattr(settings, "ROSTER_PATH"),
            holidays_path=getattr(settings, "HOLIDAYS_PATH", None),
            seed_start=parse_iso_date(getattr(settings, "SEED_START", "2025-01-01")),
            seed_end=parse_iso_date(getattr(settings, "SEED_END", "2025-03-31")),
            seed_random_seed=getattr(settings, "SEED_RANDOM_SEED", None),
            strict=bool(getattr(settings, "STRICT_STATUS_VALIDATION", True)),
            audit_limit=int(getattr(settings, "AUDIT_DEFAULT_LIMIT", 100)),
            allow_reset=bool(getattr(settings, "ALLOW_RESET", False)),
        )
        atexit.register(container.close)

        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            try:
                container.seed_service.seed_if_empty()
            except StoreUnavailableError as e:
                logger.error("Startup seeding skipped, store unavailable: %s", e)

    app.extensions["wfh_container"] = container

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_statuses(app, container)
    register_audit(app, container)
    register_roster(app, container)
    register_analytics(app, container)
    register_seeding(app, container)

    return app
