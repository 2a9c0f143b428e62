"""Mapeo de un vector de emociones a targets de audio y semillas de género."""

import logging
import re
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

from .emotions import (
    EMOTION_GENRES,
    EMOTION_PRIORITY,
    EXTENDED_EMOTIONS,
    HIGH_ENERGY_FAMILY,
    KNOWN_GENRES,
    LATIN_FAMILY,
    LATIN_GENRES,
    MELLOW_FAMILY,
    SOMBER_FAMILY,
    dominant_emotion,
    genre_label,
)
from .language import SPANISH, detect_language
from .models import MusicAttributes
from .utils import clamp, round2, unique

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttributeWeights:
    """Coeficientes del mapeo emoción -> audio features (configurables)."""

    valence_joy: float = 0.8
    valence_not_sad: float = 0.2
    valence_range: Tuple[float, float] = (0.1, 0.9)

    energy_arousal: float = 0.6  # (joy + anger)
    energy_calm: float = 0.4  # (1 - fear)
    energy_range: Tuple[float, float] = (0.2, 0.9)

    dance_joy: float = 0.7
    dance_energy: float = 0.3
    dance_range: Tuple[float, float] = (0.3, 0.8)

    base_popularity: float = 50.0
    latin_popularity_boost: float = 1.3
    dance_popularity_boost: float = 1.1
    country_popularity_damp: float = 0.85

    high_energy_boost: float = 1.2
    high_energy_dance_boost: float = 1.1
    mellow_energy_damp: float = 0.8
    mellow_valence_damp: float = 0.9
    somber_valence_damp: float = 0.7
    somber_sadness_threshold: float = 0.4

    max_genres: int = 3


DEFAULT_WEIGHTS = AttributeWeights()


def clean_vector(vector: Optional[Mapping[str, float]]) -> dict:
    """Descarta claves desconocidas y valores no numéricos o negativos."""
    out = {}
    for emotion, value in (vector or {}).items():
        if emotion not in EXTENDED_EMOTIONS:
            continue
        try:
            value = float(value)
        except (TypeError, ValueError):
            continue
        if value != value:
            continue
        out[emotion] = clamp(value, 0.0, 1.0)
    return out


class RecommendationMapper:
    def __init__(self, weights: AttributeWeights = DEFAULT_WEIGHTS, priority: Tuple[str, ...] = EMOTION_PRIORITY):
        self.weights = weights
        self.priority = priority

    def map_to_attributes(
        self,
        vector: Mapping[str, float],
        preferred_genres: Optional[Sequence[str]] = None,
        raw_text: Optional[str] = None,
    ) -> MusicAttributes:
        w = self.weights
        scores = clean_vector(vector)
        joy = scores.get("joy", 0.0)
        sadness = scores.get("sadness", 0.0)
        anger = scores.get("anger", 0.0)
        fear = scores.get("fear", 0.0)
        dominant = dominant_emotion(scores, self.priority) if scores else self.priority[0]

        valence = clamp(joy * w.valence_joy + (1 - sadness) * w.valence_not_sad, *w.valence_range)
        energy = clamp((joy + anger) * w.energy_arousal + (1 - fear) * w.energy_calm, *w.energy_range)
        danceability = clamp(joy * w.dance_joy + energy * w.dance_energy, *w.dance_range)
        popularity = w.base_popularity

        preferred = [str(g).strip().lower() for g in (preferred_genres or []) if g and str(g).strip()]
        spanish = detect_language(raw_text or "") == SPANISH
        latin_context = spanish or any(g in LATIN_FAMILY for g in preferred)

        if latin_context:
            genres = self._latin_genres(dominant, preferred, raw_text)
            popularity *= w.latin_popularity_boost
        else:
            genres = self._genres(dominant, preferred)

        # ajustes por familia de géneros preferidos
        if any(g in HIGH_ENERGY_FAMILY for g in preferred):
            energy *= w.high_energy_boost
            danceability *= w.high_energy_dance_boost
            popularity *= w.dance_popularity_boost
        if any(g in MELLOW_FAMILY for g in preferred):
            energy *= w.mellow_energy_damp
            valence *= w.mellow_valence_damp
        if any(g in SOMBER_FAMILY for g in preferred) and sadness > w.somber_sadness_threshold:
            valence *= w.somber_valence_damp
        if "country" in preferred:
            popularity *= w.country_popularity_damp

        attrs = MusicAttributes(
            valence=round2(clamp(valence, *w.valence_range)),
            energy=round2(clamp(energy, *w.energy_range)),
            danceability=round2(clamp(danceability, *w.dance_range)),
            popularity=int(round(clamp(popularity, 0, 100))),
            genres=tuple(genres),
            primary_genre=genre_label(genres[0]),
            dominant_emotion=dominant,
            is_spanish=spanish,
        )
        logger.debug("Atributos para %s: %s", dominant, attrs)
        return attrs

    def _genres(self, dominant: str, preferred: List[str]) -> List[str]:
        known = [g for g in preferred if g in KNOWN_GENRES]
        pool = EMOTION_GENRES.get(dominant) or ["pop"]
        return unique(known + pool)[: self.weights.max_genres]

    def _latin_genres(self, dominant: str, preferred: List[str], raw_text: Optional[str]) -> List[str]:
        pool = LATIN_GENRES.get(dominant) or LATIN_GENRES["joy"]
        words = set(re.findall(r"\w+", (raw_text or "").lower()))
        mentioned = [g for g in unique(list(pool) + sorted(LATIN_FAMILY)) if g in words]
        latin_preferred = [g for g in preferred if g in LATIN_FAMILY]
        return unique(mentioned + latin_preferred + pool)[: self.weights.max_genres]
