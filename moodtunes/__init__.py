from flask import Flask, jsonify, request, g
import time
import logging
from flask_cors import CORS

from .src.config import Config
from .src.pipeline import MoodPipeline
from .routes.health import bp as health_bp
from .routes.mood import bp as mood_bp

http_log = logging.getLogger("moodtunes.http")


def _register_request_logging(app):
    """Una línea por petición a /mood con estado, duración y modo del recomendador."""

    @app.before_request
    def _start_timer():
        g.started_at = time.perf_counter()

    @app.after_request
    def _log_request(resp):
        if not request.path.startswith("/mood"):
            return resp
        elapsed_ms = (time.perf_counter() - g.get("started_at", time.perf_counter())) * 1000
        mock = app.extensions["mood_pipeline"].recommender.mock_mode
        http_log.info(
            "%s %s -> %s (%.1f ms) source=%s",
            request.method,
            request.path,
            resp.status_code,
            elapsed_ms,
            "mock" if mock else "live",
        )
        return resp


def create_app(pipeline: MoodPipeline | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    logging.basicConfig(level=logging.DEBUG if Config.DEBUG else logging.INFO)

    CORS(app, resources={r"/*": {"origins": Config.CORS_ORIGINS}})

    app.extensions["mood_pipeline"] = pipeline or MoodPipeline()
    app.register_blueprint(health_bp)
    app.register_blueprint(mood_bp, url_prefix="/mood")
    _register_request_logging(app)

    @app.get("/")
    def index():
        routes = sorted({rule.rule for rule in app.url_map.iter_rules() if rule.endpoint != "static"})
        return jsonify({"name": "moodtunes", "routes": routes}), 200

    return app
