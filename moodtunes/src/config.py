import json
import os
from dotenv import load_dotenv


def _json_env(name: str, default):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return json.loads(raw)
    except ValueError:
        return default


class Config:
    load_dotenv()

    DEBUG = os.getenv("DEBUG", "true").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Spotify Client Credentials (recomendaciones en vivo)
    SPOTIFY_CLIENT_ID = os.getenv("SPOTIFY_CLIENT_ID")
    SPOTIFY_CLIENT_SECRET = os.getenv("SPOTIFY_CLIENT_SECRET")
    SPOTIFY_MARKET = os.getenv("SPOTIFY_MARKET", "US")
    SPOTIFY_TOKEN_URL = os.getenv("SPOTIFY_TOKEN_URL", "https://accounts.spotify.com/api/token")
    SPOTIFY_API_BASE = os.getenv("SPOTIFY_API_BASE", "https://api.spotify.com/v1")

    # Forzar catálogo mock aunque haya credenciales
    USE_MOCK_DATA = os.getenv("USE_MOCK_DATA", "false").lower() == "true"

    # Límites de red (segundos)
    PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", "5"))
    TOKEN_EXPIRY_SKEW = int(os.getenv("TOKEN_EXPIRY_SKEW", "60"))

    # Parámetros de recomendación
    MIN_POPULARITY = int(os.getenv("MIN_POPULARITY", "30"))
    DEFAULT_LIMIT = int(os.getenv("DEFAULT_LIMIT", "5"))
    MAX_LIMIT = int(os.getenv("MAX_LIMIT", "20"))

    # user_id -> {emoción: multiplicador}
    USER_BIASES = _json_env(
        "USER_BIASES",
        {
            "user_jim123": {"sadness": 1.2},
            "user_steph456": {"joy": 1.2},
        },
    )
