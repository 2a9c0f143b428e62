"""Recuperación de pistas: proveedor en vivo con caída a catálogo mock.

Por solicitud: TOKEN (si hace falta) -> consulta en vivo -> éxito o mock.
Si el token no se puede obtener, la instancia queda en modo mock para el
resto de la sesión.
"""

import logging
from typing import Any, Dict, List, Optional

from .catalog import COUNTRY, GENERAL, SPANISH, mock_tracks
from .config import Config
from .emotions import LATIN_FAMILY
from .errors import ProviderUnavailable
from .models import MusicAttributes, TrackRecommendation
from .services.base import ServiceProvider
from .services.client_credentials import TokenCache
from .utils import clamp

logger = logging.getLogger(__name__)


def catalog_variant(attributes: MusicAttributes) -> str:
    genres = [g.lower() for g in attributes.genres]
    if attributes.is_spanish or (genres and genres[0] in LATIN_FAMILY):
        return SPANISH
    if "country" in genres:
        return COUNTRY
    return GENERAL


class Recommender:
    def __init__(
        self,
        provider: Optional[ServiceProvider] = None,
        token_cache: Optional[TokenCache] = None,
        min_popularity: Optional[int] = None,
        max_limit: Optional[int] = None,
        use_mock: Optional[bool] = None,
    ):
        self.provider = provider
        self.token_cache = token_cache or (
            TokenCache(provider.fetch_token, skew_seconds=Config.TOKEN_EXPIRY_SKEW) if provider else None
        )
        self.min_popularity = Config.MIN_POPULARITY if min_popularity is None else min_popularity
        self.max_limit = max_limit or Config.MAX_LIMIT
        mock = Config.USE_MOCK_DATA if use_mock is None else use_mock
        self.mock_mode = bool(mock or provider is None or not provider.configured)
        if self.mock_mode:
            logger.info("Recomendaciones en modo mock")

    def _clamp_limit(self, limit: Any) -> int:
        try:
            limit = int(limit)
        except (TypeError, ValueError):
            limit = Config.DEFAULT_LIMIT
        return int(clamp(limit, 1, self.max_limit))

    def query_params(self, attributes: MusicAttributes, limit: int) -> Dict[str, Any]:
        return {
            "seed_genres": ",".join(attributes.genres[:3]) or "pop",
            "target_valence": attributes.valence,
            "target_energy": attributes.energy,
            "target_danceability": attributes.danceability,
            "target_popularity": attributes.popularity,
            "min_popularity": self.min_popularity,
            "limit": limit,
        }

    def recommend(self, attributes: MusicAttributes, limit: int = 5) -> List[TrackRecommendation]:
        limit = self._clamp_limit(limit)
        if self.mock_mode:
            return self.mock(attributes, limit)

        try:
            token = self.token_cache.token()
        except ProviderUnavailable as exc:
            logger.warning("Token no disponible (%s); modo mock para el resto de la sesión", exc)
            self.mock_mode = True
            return self.mock(attributes, limit)

        try:
            raw = self.provider.search(token, self.query_params(attributes, limit))
            genre = attributes.genres[0] if attributes.genres else None
            tracks = [t for t in (self.provider.normalize(item, genre) for item in raw) if t]
            if not tracks:
                raise ProviderUnavailable("sin resultados")
        except ProviderUnavailable as exc:
            if exc.status_code == 401:
                self.token_cache.invalidate()
            logger.warning("Proveedor %s no disponible (%s); usando catálogo mock", self.provider.name, exc)
            return self.mock(attributes, limit)
        except Exception as exc:
            logger.warning("Error inesperado del proveedor (%s); usando catálogo mock", exc)
            return self.mock(attributes, limit)

        logger.info("%d recomendaciones de %s", len(tracks), self.provider.name)
        return tracks[:limit]

    def mock(self, attributes: MusicAttributes, limit: int) -> List[TrackRecommendation]:
        variant = catalog_variant(attributes)
        logger.info("Catálogo mock %s/%s", variant, attributes.dominant_emotion)
        return mock_tracks(attributes.dominant_emotion, variant, limit)
