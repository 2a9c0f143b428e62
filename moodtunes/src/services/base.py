from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from ..models import TrackRecommendation


class ServiceProvider(ABC):
    """Clase base para proveedores de recomendaciones de música.

    Separa la obtención del token (client credentials) de la consulta, para que
    el caché de tokens viva fuera del proveedor.
    """

    name: str = "provider"

    @property
    def configured(self) -> bool:
        return True

    @abstractmethod
    def fetch_token(self) -> Tuple[Optional[str], int]:
        """Return a tuple (access_token, expires_in)."""
        raise NotImplementedError

    @abstractmethod
    def search(self, access_token: str, params: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Consulta recomendaciones por semillas de género + targets numéricos.

        Devuelve pistas crudas del proveedor; levanta ProviderUnavailable ante
        cualquier fallo.
        """
        raise NotImplementedError

    @abstractmethod
    def normalize(self, raw: Dict[str, Any], genre: Optional[str] = None) -> Optional[TrackRecommendation]:
        """Convierte una pista cruda en TrackRecommendation (o None si está incompleta)."""
        raise NotImplementedError
