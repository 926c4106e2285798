from flask import Blueprint, current_app, jsonify
from sqlalchemy import text

from app.extensions import db

bp = Blueprint("health", __name__)


def _database_up() -> bool:
    try:
        with db.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        current_app.logger.warning("probe_db_down", exc_info=True)
        return False
    return True


def _ratelimit_storage_state() -> str:
    """État du stockage des compteurs: "n/a" tant qu'il reste en mémoire."""
    uri = current_app.config.get("RATELIMIT_STORAGE_URI", "memory://")
    if not uri.startswith(("redis://", "rediss://")):
        return "n/a"
    try:
        import redis  # dépendance optionnelle (extra "redis")
        redis.from_url(uri).ping()
    except Exception:
        current_app.logger.warning("probe_redis_down", exc_info=True)
        return "down"
    return "up"


@bp.get("/healthz")
def healthz():
    return jsonify({
        "status": "ok",
        "env": current_app.config.get("APP_ENV"),
        "db": "up" if _database_up() else "down",
    })


@bp.get("/readyz")
def readyz():
    checks = {
        "db": "up" if _database_up() else "down",
        "redis": _ratelimit_storage_state(),
    }
    ready = "down" not in checks.values()
    checks["status"] = "ok" if ready else "error"
    return jsonify(checks), (200 if ready else 503)
