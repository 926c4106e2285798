import os
from flask import Flask, request
from dotenv import load_dotenv

from .config import DevConfig, ProdConfig, TestConfig
from .extensions import db, migrate, limiter
from .common.errors import register_error_handlers
from .common.logging import setup_json_logging, register_request_logging


def _select_config(env):
    if env in ("test", "testing"):
        return TestConfig
    if env == "production":
        return ProdConfig
    return DevConfig


def create_app(config_object=None):
    # Charge .env si présent (dev)
    load_dotenv()

    app = Flask(__name__)

    env = os.getenv("APP_ENV") or os.getenv("FLASK_ENV", "development")
    app.config.from_object(config_object or _select_config(env))
    app.config["APP_ENV"] = env

    # Init extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)   # Limiter lit RATELIMIT_* depuis app.config

    setup_json_logging(app)
    register_request_logging(app)

    # Importer les modèles pour que Flask-Migrate/Alembic voie les tables
    from .users import models as users_models  # noqa: F401
    from .notes import models as notes_models  # noqa: F401

    register_error_handlers(app)

    # --- Security headers ---
    @app.after_request
    def set_security_headers(resp):
        # Pages HTML sans script ni ressource externe
        resp.headers["Content-Security-Policy"] = (
            "default-src 'self'; frame-ancestors 'none'; base-uri 'none'; form-action 'self'"
        )
        resp.headers["X-Frame-Options"] = "DENY"
        resp.headers["X-Content-Type-Options"] = "nosniff"
        resp.headers["Referrer-Policy"] = "no-referrer"

        # HSTS uniquement si HTTPS (prod / reverse-proxy)
        if (env == "production" or app.config.get("ENFORCE_HTTPS")) and (
            request.is_secure or request.headers.get("X-Forwarded-Proto", "") == "https"
        ):
            resp.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains; preload"

        return resp

    # --- Blueprints ---
    from .common.health import bp as health_bp
    app.register_blueprint(health_bp)

    from .users.routes import bp as users_bp
    app.register_blueprint(users_bp, url_prefix="/users")

    from .notes.routes import bp as notes_bp
    app.register_blueprint(notes_bp, url_prefix="/users/<username>/notes")

    return app
