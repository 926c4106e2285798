# app/common/logging.py
import logging, sys, time, uuid
from pythonjsonlogger import jsonlogger
from flask import g, request

# Sondes exclues du log d'accès (bruit)
_QUIET_PATHS = ("/healthz", "/readyz")


def setup_json_logging(app):
    level = logging.DEBUG if app.debug else logging.INFO
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    # les clés passées via extra= (note_id, errors…) sont ajoutées au JSON
    fmt = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields={"levelname": "level", "asctime": "ts"},
    )
    handler.setFormatter(fmt)
    root.addHandler(handler)


def register_request_logging(app):
    @app.before_request
    def _assign_request_id_and_start_timer():
        g.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        g._start_time = time.perf_counter()

    @app.after_request
    def _log_request(resp):
        started = getattr(g, "_start_time", None)
        latency = int((time.perf_counter() - started) * 1000) if started is not None else -1

        resp.headers.setdefault("X-Request-Id", getattr(g, "request_id", "-"))

        if request.path not in _QUIET_PATHS:
            logging.getLogger("app.request").info(
                "http_request",
                extra={
                    "request_id": getattr(g, "request_id", "-"),
                    "method": request.method,
                    "path": request.path,
                    "status": resp.status_code,
                    "latency_ms": latency,
                },
            )
        return resp

    @app.teardown_request
    def _teardown(exc):
        if exc:
            logging.getLogger("app.error").error(
                "unhandled_exception",
                exc_info=exc,
                extra={"request_id": getattr(g, "request_id", "-")},
            )
