from flask import Blueprint, current_app, jsonify
from ..src.config import Config


bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    recommender = current_app.extensions["mood_pipeline"].recommender
    provider = recommender.provider
    return jsonify({
        "status": "ok",
        "service": "moodtunes",
        "debug": Config.DEBUG,
        "provider": provider.name if provider else None,
        "provider_configured": bool(provider and provider.configured),
        "mock_mode": recommender.mock_mode,
    }), 200
