from conftest import FakeProvider
from moodtunes.src.bias import BiasPolicy
from moodtunes.src.models import UserProfile
from moodtunes.src.pipeline import MoodPipeline
from moodtunes.src.recommender import Recommender
from moodtunes.src.sentiment import EmotionClassifier


def test_run_with_live_provider(classifier):
    provider = FakeProvider()
    pipeline = MoodPipeline(classifier=classifier, recommender=Recommender(provider=provider, use_mock=False))
    out = pipeline.run("I am so happy and excited", limit=4)
    assert out["language"] == "en"
    assert out["attributes"]["dominantEmotion"] == "joy"
    assert [t["source"] for t in out["tracks"]] == ["fake"] * 4
    params = provider.search_calls[0][1]
    assert params["seed_genres"] == "pop,dance,funk"


def test_run_falls_back_when_token_fails(classifier):
    provider = FakeProvider(fail_token=True)
    pipeline = MoodPipeline(classifier=classifier, recommender=Recommender(provider=provider, use_mock=False))
    out = pipeline.run("I am furious and angry")
    assert out["attributes"]["dominantEmotion"] == "anger"
    assert out["tracks"]
    assert all(t["source"] == "mock" for t in out["tracks"])


def test_user_profile_drives_bias_and_genres():
    classifier = EmotionClassifier(bias_policy=BiasPolicy({"u1": {"sadness": 3}}))
    pipeline = MoodPipeline(classifier=classifier, recommender=Recommender(use_mock=True))
    user = UserProfile(id="u1", name="Ana", preferred_genres=("blues",))
    out = pipeline.run("", user=user)
    assert out["emotions"]["sadness"] == 0.5
    assert out["attributes"]["dominantEmotion"] == "sadness"
    assert out["attributes"]["genres"][0] == "blues"


def test_explicit_genres_override_profile(mock_pipeline):
    user = UserProfile(id="u2", preferred_genres=("blues",))
    out = mock_pipeline.run("I am happy", user=user, preferred_genres=["jazz"])
    assert out["attributes"]["genres"][0] == "jazz"


def test_nostalgic_text_still_gets_full_track_list(classifier):
    provider = FakeProvider(fail_token=True)
    pipeline = MoodPipeline(classifier=classifier, recommender=Recommender(provider=provider, use_mock=False))
    out = pipeline.run("I'm feeling nostalgic today, thinking about old memories and simpler times.", limit=4)
    assert out["language"] == "en"
    assert max(out["emotions"].values()) <= 0.4
    assert out["attributes"]["dominantEmotion"] == "joy"
    assert len(out["tracks"]) == 4
    assert all(t["source"] == "mock" for t in out["tracks"])


def test_zero_limit_is_clamped_not_defaulted(mock_pipeline):
    out = mock_pipeline.run("I am happy", limit=0)
    assert len(out["tracks"]) == 1
