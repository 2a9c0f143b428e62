"""Servicio OOP para consumir recomendaciones de Spotify.

Usa Client Credentials; no requiere tokens de usuario.
"""

from typing import Any, Dict, List, Optional, Tuple
import requests

from ..config import Config
from ..errors import ProviderUnavailable
from ..models import TrackRecommendation
from .base import ServiceProvider


class SpotifyService(ServiceProvider):
    name = "spotify"

    def __init__(
        self,
        client_id: str | None = None,
        client_secret: str | None = None,
        market: str | None = None,
        timeout: float | None = None,
    ):
        self.client_id = client_id or Config.SPOTIFY_CLIENT_ID
        self.client_secret = client_secret or Config.SPOTIFY_CLIENT_SECRET
        self.market = (market or Config.SPOTIFY_MARKET).upper()
        self.timeout = timeout or Config.PROVIDER_TIMEOUT
        self.token_url = Config.SPOTIFY_TOKEN_URL
        self.api_base = Config.SPOTIFY_API_BASE.rstrip("/")

    @property
    def configured(self) -> bool:
        return bool(self.client_id and self.client_secret)

    def fetch_token(self) -> Tuple[Optional[str], int]:
        if not self.configured:
            raise ProviderUnavailable("Faltan SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET")
        try:
            resp = requests.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
                timeout=self.timeout,
            )
            resp.raise_for_status()
            data = resp.json() or {}
        except requests.RequestException as exc:
            status = getattr(getattr(exc, "response", None), "status_code", None)
            raise ProviderUnavailable(f"No se pudo obtener token de Spotify: {exc}", status) from exc
        except ValueError as exc:
            raise ProviderUnavailable(f"Respuesta de token inválida: {exc}") from exc
        return data.get("access_token"), int(data.get("expires_in", 3600))

    def _auth_headers(self, token: str) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def search(self, access_token: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """GET /v1/recommendations con semillas de género y targets de audio."""
        query = dict(params)
        query.setdefault("market", self.market)
        try:
            r = requests.get(
                f"{self.api_base}/recommendations",
                headers=self._auth_headers(access_token),
                params=query,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ProviderUnavailable(f"Spotify no disponible: {exc}") from exc
        if r.status_code >= 400:
            raise ProviderUnavailable(f"Spotify error {r.status_code}", r.status_code)
        try:
            data = r.json() or {}
        except ValueError as exc:
            raise ProviderUnavailable(f"Respuesta inválida de Spotify: {exc}") from exc
        tracks = data.get("tracks") if isinstance(data, dict) else None
        if not isinstance(tracks, list):
            raise ProviderUnavailable("Respuesta de Spotify sin 'tracks'")
        return tracks

    def normalize(self, t: Dict[str, Any], genre: Optional[str] = None) -> Optional[TrackRecommendation]:
        if not isinstance(t, dict):
            return None
        track_id = t.get("id")
        title = t.get("name")
        artists = ", ".join(a.get("name") for a in (t.get("artists") or []) if isinstance(a, dict) and a.get("name"))
        if not (track_id and title and artists):
            return None
        return TrackRecommendation(
            id=str(track_id),
            title=title,
            artist=artists,
            album=(t.get("album") or {}).get("name"),
            genre=genre,
            popularity=t.get("popularity"),
            preview_url=t.get("preview_url"),
            external_url=(t.get("external_urls") or {}).get("spotify"),
            source=self.name,
        )
