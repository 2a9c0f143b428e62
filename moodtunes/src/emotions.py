"""Mapa centralizado de emociones -> géneros y prioridades.

Estas tablas orientan el mapeo de un vector de emociones a semillas de género
para el proveedor de recomendaciones y al catálogo mock.
"""

from typing import Dict, List, Mapping, Optional, Tuple


CORE_EMOTIONS: Tuple[str, ...] = ("joy", "sadness", "anger", "fear")
EXTENDED_EMOTIONS: Tuple[str, ...] = CORE_EMOTIONS + ("surprise", "disgust")

# Desempate del argmax: la primera gana.
EMOTION_PRIORITY: Tuple[str, ...] = ("joy", "anger", "fear", "sadness", "surprise", "disgust")

EMOTION_GENRES: Dict[str, List[str]] = {
    "joy": ["pop", "dance", "funk", "reggae", "latin"],
    "sadness": ["indie", "folk", "blues", "country", "alternative"],
    "anger": ["rock", "metal", "punk", "hip-hop", "electronic"],
    "fear": ["ambient", "classical", "indie", "folk", "acoustic"],
    "surprise": ["electronic", "experimental", "jazz", "funk"],
    "disgust": ["alternative", "punk", "metal", "grunge"],
}

LATIN_GENRES: Dict[str, List[str]] = {
    "joy": ["reggaeton", "salsa", "latin", "merengue"],
    "sadness": ["bachata", "bolero", "latin"],
    "anger": ["reggaeton", "latin", "rock"],
    "fear": ["bolero", "latin", "acoustic"],
    "surprise": ["salsa", "cumbia", "latin"],
    "disgust": ["latin", "rock", "punk"],
}

# Familias de género que ajustan los targets de audio
LATIN_FAMILY = frozenset({"latin", "reggaeton", "salsa", "bachata", "bolero", "merengue", "cumbia"})
HIGH_ENERGY_FAMILY = frozenset({"electronic", "dance", "latin", "reggaeton", "edm", "house"})
MELLOW_FAMILY = frozenset({"folk", "ambient", "classical", "indie", "acoustic"})
SOMBER_FAMILY = frozenset({"country", "blues"})

GENRE_LABELS: Dict[str, str] = {
    "hip-hop": "Hip-Hop",
    "r-n-b": "R&B",
    "edm": "EDM",
    "latin": "Latin",
    "reggaeton": "Reggaeton",
}

KNOWN_GENRES = frozenset(
    [g for pool in EMOTION_GENRES.values() for g in pool]
    + [g for pool in LATIN_GENRES.values() for g in pool]
    + ["r-n-b", "soul", "jazz", "edm", "house", "rap"]
)


def genre_label(genre: str) -> str:
    return GENRE_LABELS.get(genre, genre.replace("-", " ").title())


def dominant_emotion(vector: Mapping[str, float], priority: Optional[Tuple[str, ...]] = None) -> str:
    """Argmax del vector; empates resueltos por EMOTION_PRIORITY.

    Las emociones fuera de la tabla de prioridad pierden cualquier empate.
    """
    order = priority or EMOTION_PRIORITY
    if not vector:
        return order[0]

    def rank(emotion: str) -> int:
        return order.index(emotion) if emotion in order else len(order)

    return max(vector, key=lambda e: (vector[e], -rank(e)))
