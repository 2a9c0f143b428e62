"""Clasificador de emociones por patrones ponderados (inglés / español).

El texto se asigna a un idioma, se suman los pesos de cada patrón que coincide
por emoción sobre un epsilon base, se aplica un refuerzo si hay
intensificadores y el resultado se normaliza a una distribución sobre
``joy, sadness, anger, fear``. Si algo falla se usa ``KeywordCountClassifier``.
"""

import logging
import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Pattern, Sequence, Tuple

from .bias import BiasPolicy
from .emotions import CORE_EMOTIONS
from .errors import ClassificationDegraded
from .language import ENGLISH, SPANISH, detect_language
from .models import AnalysisContext, EmotionVector
from .utils import normalize_scores

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedPattern:
    pattern: Pattern
    weight: float


@dataclass(frozen=True)
class Lexicon:
    language: str
    epsilon: float
    patterns: Mapping[str, Tuple[WeightedPattern, ...]]
    intensifier: Pattern
    intensifier_threshold: float
    intensifier_boost: float


def build_lexicon(
    language: str,
    epsilon: float,
    patterns: Mapping[str, Sequence[Tuple[str, float]]],
    intensifier: str,
    threshold: float,
    boost: float,
) -> Lexicon:
    compiled = {
        emotion: tuple(WeightedPattern(re.compile(rx, re.IGNORECASE), weight) for rx, weight in entries)
        for emotion, entries in patterns.items()
    }
    return Lexicon(
        language=language,
        epsilon=epsilon,
        patterns=MappingProxyType(compiled),
        intensifier=re.compile(intensifier, re.IGNORECASE),
        intensifier_threshold=threshold,
        intensifier_boost=boost,
    )


ENGLISH_LEXICON = build_lexicon(
    ENGLISH,
    epsilon=0.1,
    patterns={
        "joy": [
            (r"\b(happ(y|ier|iest|iness)|joy(ful)?|great|excit(ed|ing)|wonderful|lov(e|ed|ing)|amazing|"
             r"fantastic|awesome|brilliant|excellent|cheerful|delighted|ecstatic|elated|euphoric|gleeful|"
             r"jubilant|overjoyed|thrilled|upbeat|blissful|glad)\b", 0.4),
            (r"\b(party|celebrat(e|ed|ing|ion)|birthday|anniversary|graduat(ed|ion))\b", 0.3),
            (r"\b(promoted|promotion|hired|got\s+(a|the|my)\s+(new\s+)?job)\b", 0.3),
        ],
        "sadness": [
            (r"\b(sad|depressed|down|unhappy|miss(ing)?|lonely|melancholy|gloomy|sorrowful|mournful|dejected|"
             r"despondent|heartbroken|blue|grief|weepy|crying|tears)\b", 0.4),
            (r"\b(lost\s+(my|a|the)\s+\w+|fired|broke\s+up|breakup|devastated|hopeless|miserable)\b", 0.3),
        ],
        "anger": [
            (r"\b(angry|mad|furious|frustrated|annoyed|irritated|outraged|livid|enraged|incensed|irate|pissed|"
             r"upset|bitter|resentful)\b", 0.4),
            (r"\b(hate|unfair|fed\s+up|sick\s+of|rage)\b", 0.3),
        ],
        "fear": [
            (r"\b(scared|afraid|nervous|anxious|worried|terrified|petrified|frightened|panicked|apprehensive|"
             r"uneasy|distressed|overwhelmed)\b", 0.4),
            (r"\b(stress(ed)?|panic|dread(ing)?|anxiety|fearful)\b", 0.3),
        ],
    },
    intensifier=r"\b(very|extremely|really|super|incredibly|tremendously|absolutely|totally)\b",
    threshold=0.2,
    boost=1.2,
)

SPANISH_LEXICON = build_lexicon(
    SPANISH,
    epsilon=0.05,
    patterns={
        "joy": [
            (r"\b(feliz|contento|contenta|alegre|emocionad[oa]|genial|increíble|fantástic[oa]|maravillos[oa]|"
             r"súper\s+bien|amor|corazón|sonrío|celebrar|fiesta|baile|bailar|música|cantar|estoy\s+bien|"
             r"me\s+encanta|qué\s+bueno|excelente)\b", 0.7),
            (r"(estoy|me|siento|muy|súper).*\bfeliz\b", 0.8),
            (r"\b(reggaeton|salsa|merengue|cumbia)\b", 0.3),
            # mezcla de idiomas en contexto latino ("party dancing", "happy fiesta")
            (r"\b(happy|excited|dancing|party|love)\b", 0.4),
        ],
        "sadness": [
            (r"\b(triste|deprimid[oa]|mal|llorar|lágrimas|melancólic[oa]|sol[oa]|extraño|dolor|pena|lamento|"
             r"nostálgic[oa]|perdid[oa]|vacío)\b", 0.7),
            (r"\b(sad|lonely|heartbroken|depressed)\b", 0.4),
        ],
        "anger": [
            (r"\b(enojad[oa]|furios[oa]|molest[oa]|irritad[oa]|odio|maldit[oa]|rabia|ira|fastidio|hart[oa]|"
             r"cabread[oa]|enfadad[oa])\b", 0.7),
            (r"\b(angry|mad|furious)\b", 0.4),
        ],
        "fear": [
            (r"\b(miedo|asustad[oa]|nervios[oa]|ansiedad|preocupad[oa]|pánico|temor|inquiet[oa]|angustia|"
             r"estrés|tens[oa])\b", 0.7),
            (r"\b(scared|anxious|nervous|worried)\b", 0.4),
        ],
    },
    intensifier=r"\b(muy|súper|extremadamente|bastante|demasiado|totalmente|increíblemente)\b",
    threshold=0.3,
    boost=1.5,
)

DEFAULT_LEXICONS: Mapping[str, Lexicon] = MappingProxyType({
    ENGLISH: ENGLISH_LEXICON,
    SPANISH: SPANISH_LEXICON,
})


def neutral_vector(emotions: Iterable[str] = CORE_EMOTIONS) -> EmotionVector:
    emotions = tuple(emotions)
    return normalize_scores({e: 1.0 for e in emotions})


class KeywordCountClassifier:
    """Análisis de respaldo: cuenta palabras clave por emoción.

    Determinista y sin regex compuestas; mismo formato que el clasificador
    principal.
    """

    KEYWORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
        "joy": ("happy", "excited", "great", "love", "amazing", "fantastic", "perfect", "awesome",
                "wonderful", "celebration", "promoted", "feliz", "emocionado", "increíble", "maravilloso"),
        "sadness": ("sad", "depressed", "lonely", "terrible", "awful", "miserable", "triste",
                    "deprimido", "horrible"),
        "anger": ("angry", "furious", "mad", "frustrated", "annoyed", "hate", "enojado", "furioso",
                  "molesto"),
        "fear": ("scared", "worried", "anxious", "nervous", "afraid", "stressed", "miedo",
                 "preocupado", "ansioso", "nervioso"),
    })
    BASE = 0.1
    PER_HIT = 0.3

    def analyze(self, text: str) -> EmotionVector:
        words = re.findall(r"\w+", (text or "").lower())
        scores = {emotion: self.BASE for emotion in CORE_EMOTIONS}
        for word in words:
            for emotion, keywords in self.KEYWORDS.items():
                if word in keywords:
                    scores[emotion] += self.PER_HIT
        return normalize_scores(scores)


class EmotionClassifier:
    """Clasifica texto libre en un vector de emociones normalizado."""

    def __init__(
        self,
        lexicons: Optional[Mapping[str, Lexicon]] = None,
        bias_policy: Optional[BiasPolicy] = None,
        fallback: Optional[KeywordCountClassifier] = None,
    ):
        self.lexicons = lexicons or DEFAULT_LEXICONS
        self.bias_policy = bias_policy if bias_policy is not None else BiasPolicy.from_config()
        self.fallback = fallback or KeywordCountClassifier()

    def context(self, text: str, user_id: Optional[str] = None) -> AnalysisContext:
        text = text.strip() if isinstance(text, str) else ""
        return AnalysisContext(text=text, user_id=user_id, language=detect_language(text))

    def analyze(self, text: str, user_id: Optional[str] = None) -> EmotionVector:
        ctx = self.context(text, user_id)
        if not ctx.text:
            vector = neutral_vector()
        else:
            try:
                vector = self._classify(ctx)
            except Exception as exc:
                logger.warning("Clasificación degradada (%s); usando conteo de palabras clave", exc)
                vector = self.fallback.analyze(ctx.text)
        if ctx.user_id:
            vector = self.bias_policy.apply(vector, ctx.user_id)
        return vector

    def raw_scores(self, ctx: AnalysisContext) -> Dict[str, float]:
        lexicon = self.lexicons.get(ctx.language) or self.lexicons[ENGLISH]
        scores = {emotion: lexicon.epsilon for emotion in CORE_EMOTIONS}
        for emotion, entries in lexicon.patterns.items():
            for entry in entries:
                if entry.pattern.search(ctx.text):
                    scores[emotion] = scores.get(emotion, lexicon.epsilon) + entry.weight
        if lexicon.intensifier.search(ctx.text):
            for emotion, score in scores.items():
                if score > lexicon.intensifier_threshold:
                    scores[emotion] = score * lexicon.intensifier_boost
        return scores

    def _classify(self, ctx: AnalysisContext) -> EmotionVector:
        try:
            vector = normalize_scores(self.raw_scores(ctx))
        except ValueError as exc:
            raise ClassificationDegraded(str(exc)) from exc
        if set(vector) != set(CORE_EMOTIONS) or abs(sum(vector.values()) - 1.0) > 0.01:
            raise ClassificationDegraded(f"vector inválido: {vector}")
        logger.debug("Emociones (%s): %s", ctx.language, vector)
        return vector
