import pytest

from moodtunes.src.bias import BiasPolicy
from moodtunes.src.emotions import CORE_EMOTIONS, dominant_emotion
from moodtunes.src.language import SPANISH
from moodtunes.src.sentiment import (
    ENGLISH_LEXICON,
    EmotionClassifier,
    KeywordCountClassifier,
    neutral_vector,
)


def assert_distribution(vector):
    assert set(vector) == set(CORE_EMOTIONS)
    assert all(0.0 <= v <= 1.0 for v in vector.values())
    assert sum(vector.values()) == pytest.approx(1.0, abs=0.01)


@pytest.mark.parametrize("text,expected", [
    ("I am so happy and excited", "joy"),
    ("I am furious and angry about this", "anger"),
    ("I feel sad and lonely tonight", "sadness"),
    ("I'm nervous and anxious about tomorrow", "fear"),
    ("Estoy muy feliz hoy", "joy"),
    ("Estoy triste y sola", "sadness"),
    ("¡Tengo ganas de bailar! Dame reggaeton y salsa.", "joy"),
])
def test_dominant_emotion(classifier, text, expected):
    vector = classifier.analyze(text)
    assert_distribution(vector)
    assert dominant_emotion(vector) == expected


def test_empty_text_is_neutral(classifier):
    assert classifier.analyze("   ") == {e: 0.25 for e in CORE_EMOTIONS}
    assert classifier.analyze(None) == neutral_vector()


def test_text_without_signals_ties_to_joy(classifier):
    vector = classifier.analyze("Feeling nostalgic about old times")
    assert vector == {e: 0.25 for e in CORE_EMOTIONS}
    assert dominant_emotion(vector) == "joy"


def test_spanish_intensifier_boosts(classifier):
    plain = classifier.analyze("estoy feliz")
    boosted = classifier.analyze("estoy muy feliz")
    assert boosted["joy"] >= plain["joy"]
    assert boosted["joy"] > 0.9


def test_english_intensifier_only_boosts_above_threshold(classifier):
    ctx = classifier.context("I am really happy")
    scores = classifier.raw_scores(ctx)
    assert scores["joy"] == pytest.approx((ENGLISH_LEXICON.epsilon + 0.4) * 1.2)
    assert scores["sadness"] == pytest.approx(ENGLISH_LEXICON.epsilon)


def test_context_strips_and_detects_language(classifier):
    ctx = classifier.context("  Estoy feliz  ", "u1")
    assert ctx.text == "Estoy feliz"
    assert ctx.user_id == "u1"
    assert ctx.language == SPANISH


class BrokenClassifier(EmotionClassifier):
    def raw_scores(self, ctx):
        raise RuntimeError("regex engine exploded")


def test_falls_back_to_keyword_counts():
    classifier = BrokenClassifier(bias_policy=BiasPolicy({}))
    vector = classifier.analyze("I am happy")
    assert_distribution(vector)
    assert vector == KeywordCountClassifier().analyze("I am happy")
    assert dominant_emotion(vector) == "joy"


def test_invalid_vector_degrades_to_fallback():
    class ZeroScores(EmotionClassifier):
        def raw_scores(self, ctx):
            return {e: 0.0 for e in CORE_EMOTIONS}

    vector = ZeroScores(bias_policy=BiasPolicy({})).analyze("I am angry")
    assert dominant_emotion(vector) == "anger"


def test_keyword_counter_counts_each_hit():
    vector = KeywordCountClassifier().analyze("sad sad happy")
    # 0.1 + 2*0.3 frente a 0.1 + 0.3
    assert vector["sadness"] > vector["joy"] > vector["anger"]
    assert_distribution(vector)


def test_user_bias_is_applied():
    policy = BiasPolicy({"user_jim123": {"sadness": 1.2}})
    classifier = EmotionClassifier(bias_policy=policy)
    text = "Feeling nostalgic about old times"
    plain = classifier.analyze(text)
    biased = classifier.analyze(text, "user_jim123")
    assert biased["sadness"] > plain["sadness"]
    assert dominant_emotion(biased) == "sadness"
    assert classifier.analyze(text, "someone_else") == plain


@pytest.mark.parametrize("text", ["I am scared", "I am worried", "I feel overwhelmed"])
def test_fear_only_text_stays_on_pattern_engine(classifier, caplog, text):
    with caplog.at_level("WARNING", logger="moodtunes.src.sentiment"):
        vector = classifier.analyze(text)
    assert "degradada" not in caplog.text
    assert_distribution(vector)
    assert dominant_emotion(vector) == "fear"
    assert vector["fear"] >= 0.62


@pytest.mark.parametrize("make_classifier,text", [
    (lambda: EmotionClassifier(bias_policy=BiasPolicy({})), "I am so happy and excited"),
    (lambda: EmotionClassifier(bias_policy=BiasPolicy({})), "Estoy muy feliz hoy"),
    (lambda: EmotionClassifier(bias_policy=BiasPolicy({})), ""),
    (lambda: BrokenClassifier(bias_policy=BiasPolicy({})), "sad sad happy"),
])
def test_analyze_is_idempotent(make_classifier, text):
    classifier = make_classifier()
    first = classifier.analyze(text)
    second = classifier.analyze(text)
    assert first == second
    assert first is not second
