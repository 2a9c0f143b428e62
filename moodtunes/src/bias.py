"""Ajuste del vector de emociones por usuario.

Cada usuario conocido tiene multiplicadores por emoción (p. ej. un perfil que
históricamente tiende a la tristeza). Los multiplicadores vienen de la
configuración, no del código.
"""

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .config import Config
from .models import EmotionVector
from .utils import normalize_scores

logger = logging.getLogger(__name__)


class BiasPolicy:
    def __init__(self, multipliers: Optional[Mapping[str, Mapping[str, float]]] = None):
        cleaned: Dict[str, Mapping[str, float]] = {}
        for user_id, factors in (multipliers or {}).items():
            if not isinstance(factors, Mapping):
                logger.warning("Bias ignorado para %s: se esperaba un objeto", user_id)
                continue
            valid = {}
            for emotion, factor in factors.items():
                try:
                    factor = float(factor)
                except (TypeError, ValueError):
                    continue
                if factor > 0:
                    valid[emotion] = factor
            cleaned[str(user_id)] = MappingProxyType(valid)
        self._multipliers = MappingProxyType(cleaned)

    @classmethod
    def from_config(cls) -> "BiasPolicy":
        return cls(Config.USER_BIASES)

    def multipliers_for(self, user_id: Optional[str]) -> Mapping[str, float]:
        if not user_id:
            return MappingProxyType({})
        return self._multipliers.get(user_id, MappingProxyType({}))

    def apply(self, vector: EmotionVector, user_id: Optional[str]) -> EmotionVector:
        factors = self.multipliers_for(user_id)
        if not factors:
            return dict(vector)
        adjusted = dict(vector)
        for emotion, factor in factors.items():
            if emotion in adjusted:
                adjusted[emotion] = min(1.0, adjusted[emotion] * factor)
        try:
            return normalize_scores(adjusted)
        except ValueError:
            logger.warning("Bias de %s produjo un vector inválido; se conserva el original", user_id)
            return dict(vector)
