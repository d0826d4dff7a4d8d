from __future__ import annotations

import importlib
import logging
from datetime import date
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .api.client import ApiClient
from .changelog.controller import register as register_changelog
from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_API_TIMEOUT_SECONDS, DEFAULT_TARGET_DAYS
from .dashboard.controller import register as register_dashboard
from .expiry.controller import register as register_expiry
from .logging_setup import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings_module: Optional[str] = None,
    *,
    api_client: Optional[ApiClient] = None,
    today_provider: Optional[Callable[[], date]] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["API_BASE_URL"] = getattr(settings, "API_BASE_URL")

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    if app.config["DEBUG"]:
        logger.info("[hr-console] settings=%s api=%s", settings_module, app.config["API_BASE_URL"])

    # Service token forwarded as the bearer credential; sign-in lives in the HR API.
    configured_token = getattr(settings, "API_TOKEN", "") or None

    client = api_client or ApiClient(
        app.config["API_BASE_URL"],
        token_provider=lambda: configured_token,
        timeout=float(getattr(settings, "API_TIMEOUT", DEFAULT_API_TIMEOUT_SECONDS)),
    )
    container = build_container(
        client=client,
        default_target_days=int(getattr(settings, "DEFAULT_TARGET_DAYS", DEFAULT_TARGET_DAYS)),
        today_provider=today_provider,
    )
    app.extensions["hr_console"] = container

    @app.route("/login", methods=["GET"], endpoint="login")
    def login():
        return jsonify({"success": False, "message": "Please sign in to continue."}), 401

    register_expiry(app, container)
    register_changelog(app, container)
    register_dashboard(app, container)

    return app
