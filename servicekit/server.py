"""The HTTP server and its routes."""

from __future__ import annotations

import json
import logging

from flask import Blueprint, Flask, Response, g

from .config import AppConfig
from .models import HealthResp, Result, success

ROOT = "/"
PUSH_GROUP = "/push"
HEALTH = "/health"
TEST_CONTROLLER = "/getName"

_MODES = ("release", "test")
_logger = logging.getLogger("servicekit")


def _respond(result: Result) -> Response:
    body = json.dumps(result.to_dict(), ensure_ascii=False, separators=(",", ":"))
    return Response(body, status=200, mimetype="application/json")


def _install_middleware(app: Flask) -> None:
    @app.before_request
    def _set_request_value() -> None:
        g.request = "value"

    @app.after_request
    def _json_content_type(response: Response) -> Response:
        response.headers["content-type"] = "application/json"
        return response


def create_app(config: AppConfig | None = None, mode: str | None = None) -> Flask:
    """Build the application with its middleware and routes."""
    config = config if config is not None else AppConfig()
    mode = mode if mode is not None else config.mode
    run_mode = mode if mode in _MODES else "debug"

    app = Flask("servicekit")
    app.config["MODE"] = run_mode
    app.testing = run_mode == "test"
    _install_middleware(app)

    @app.get(ROOT)
    def _root() -> Response:
        return _respond(success(config.app_name))

    push = Blueprint("push", "servicekit", url_prefix=PUSH_GROUP)

    @push.get(HEALTH)
    def _health() -> Response:
        return _respond(success(HealthResp(satellite=config.type)))

    @push.get(TEST_CONTROLLER)
    def _get_name() -> Response:
        return _respond(success("hello"))

    app.register_blueprint(push)
    return app


def serve(http_port: str, mode: str, config: AppConfig | None = None) -> None:
    """Run the server on all interfaces until it stops; start-up errors are logged."""
    app = create_app(config, mode)
    try:
        port = int(http_port) if http_port else 0
    except ValueError:
        _logger.error("invalid http port: %r", http_port)
        return
    try:
        app.run(host="0.0.0.0", port=port, debug=False, use_reloader=False, threaded=True)
    except (OSError, OverflowError) as exc:
        _logger.error("http server stopped: %s", exc)