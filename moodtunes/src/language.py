"""Detección de idioma (español / inglés) por señales léxicas.

Es una heurística best-effort: basta una señal (palabra frecuente en español,
caracteres propios del español o una palabra clave de música latina) para
marcar el texto como ``es``. No hace análisis gramatical.
"""

import re
from typing import FrozenSet

SPANISH = "es"
ENGLISH = "en"

SPANISH_WORDS: FrozenSet[str] = frozenset({
    "estoy", "feliz", "triste", "enojado", "muy", "hoy", "día", "corazón", "amor",
    "vida", "bien", "mal", "contento", "alegre", "emocionado", "deprimido", "furioso",
    "nervioso", "ansiedad", "miedo", "esperanza", "soy", "está", "tengo", "quiero",
    "necesito", "música", "canción", "también", "pero", "porque", "cuando", "donde",
    "como", "que", "este", "súper", "genial", "increíble", "fantástico", "maravilloso",
    "celebrar", "con", "para", "del", "las", "los", "una", "esto", "poco", "mucho",
    "ganas", "dame", "baile", "bailar", "español", "ranchera", "mariachi",
})

SPANISH_PHRASES = ("me siento",)

LATIN_KEYWORDS: FrozenSet[str] = frozenset({
    "latin", "latino", "latina", "reggaeton", "salsa", "bachata", "fiesta", "dancing",
    "merengue", "cumbia", "hispanic",
})

_SPANISH_CHARS = re.compile(r"[ñáéíóúü¿¡]")
_WORD = re.compile(r"\w+")


def detect_language(text: str) -> str:
    if not text:
        return ENGLISH
    lower = text.lower()
    words = set(_WORD.findall(lower))
    if words & SPANISH_WORDS:
        return SPANISH
    if any(phrase in lower for phrase in SPANISH_PHRASES):
        return SPANISH
    if _SPANISH_CHARS.search(lower):
        return SPANISH
    if words & LATIN_KEYWORDS:
        return SPANISH
    return ENGLISH


def is_spanish(text: str) -> bool:
    return detect_language(text) == SPANISH
