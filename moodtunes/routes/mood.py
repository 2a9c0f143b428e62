"""Endpoints del pipeline de ánimo: análisis, atributos y recomendaciones.

Estos endpoints encapsulan el clasificador y el mapeo para que el frontend no
dependa directamente de la API de Spotify.
"""

from flask import Blueprint, current_app, jsonify, request
from typing import Any, Dict, List

from ..src.config import Config
from ..src.emotions import EMOTION_GENRES, EMOTION_PRIORITY, EXTENDED_EMOTIONS, LATIN_GENRES
from ..src.models import MusicAttributes, UserProfile
from ..src.pipeline import MoodPipeline


bp = Blueprint("mood", __name__)


def _pipeline() -> MoodPipeline:
    return current_app.extensions["mood_pipeline"]


def _genres(p: Dict[str, Any]) -> List[str]:
    genres = p.get("preferred_genres") or p.get("preferredGenres") or []
    if not isinstance(genres, list):
        raise ValueError("preferred_genres debe ser una lista")
    return [str(g) for g in genres]


def _limit(p: Dict[str, Any]) -> int:
    # el recomendador acota a [1, MAX_LIMIT]
    limit = p.get("limit", Config.DEFAULT_LIMIT)
    return Config.DEFAULT_LIMIT if limit is None else int(limit)


@bp.post("/analyze")
def analyze():
    """Body: { text: str, user_id?: str } -> { emotions, language }"""
    try:
        p = request.get_json(force=True) or {}
        text = p.get("text") or ""
        if not isinstance(text, str):
            return jsonify({"error": "text debe ser string"}), 400
        user_id = p.get("user_id") or p.get("userId")
        classifier = _pipeline().classifier
        ctx = classifier.context(text, user_id)
        return jsonify({"emotions": classifier.analyze(text, user_id), "language": ctx.language}), 200
    except Exception as e:
        return jsonify({"error": str(e)}), 400


@bp.post("/attributes")
def attributes():
    """Body: { emotions: {joy, sadness, anger, fear}, preferred_genres?: [str], raw_text?: str }"""
    try:
        p = request.get_json(force=True) or {}
        emotions = p.get("emotions") or p.get("emotionVector")
        if not isinstance(emotions, dict) or not emotions:
            return jsonify({"error": "emotions requerido"}), 400
        raw_text = p.get("raw_text") or p.get("rawText")
        attrs = _pipeline().mapper.map_to_attributes(emotions, preferred_genres=_genres(p), raw_text=raw_text)
        return jsonify(attrs.to_dict()), 200
    except ValueError as ve:
        return jsonify({"error": str(ve)}), 400
    except Exception as e:
        return jsonify({"error": str(e)}), 400


@bp.post("/recommend")
def recommend():
    """Body: { attributes: MusicAttributes, limit?: int } -> { items, returned }"""
    try:
        p = request.get_json(force=True) or {}
        raw = p.get("attributes")
        if not isinstance(raw, dict):
            return jsonify({"error": "attributes requerido"}), 400
        tracks = _pipeline().recommender.recommend(MusicAttributes.from_dict(raw), _limit(p))
        items = [t.to_dict() for t in tracks]
        return jsonify({"items": items, "returned": len(items)}), 200
    except ValueError as ve:
        return jsonify({"error": str(ve)}), 400
    except Exception as e:
        return jsonify({"error": "No se pudieron obtener recomendaciones", "detail": str(e)}), 502


@bp.post("")
def run_pipeline():
    """Body: { text, user_id?, user?: {id, name, preferred_genres}, preferred_genres?, limit? }"""
    try:
        p = request.get_json(force=True) or {}
        text = p.get("text") or ""
        if not isinstance(text, str):
            return jsonify({"error": "text debe ser string"}), 400
        user = UserProfile.from_dict(p["user"]) if isinstance(p.get("user"), dict) else None
        payload = _pipeline().run(
            text,
            user=user,
            preferred_genres=_genres(p),
            limit=_limit(p),
            user_id=p.get("user_id") or p.get("userId"),
        )
        return jsonify(payload), 200
    except ValueError as ve:
        return jsonify({"error": str(ve)}), 400
    except Exception as e:
        return jsonify({"error": "No se pudo analizar el texto", "detail": str(e)}), 502


@bp.get("/emotions")
def list_emotions():
    return jsonify({
        "items": list(EXTENDED_EMOTIONS),
        "priority": list(EMOTION_PRIORITY),
        "genres": EMOTION_GENRES,
        "latin_genres": LATIN_GENRES,
    }), 200
