import pytest

from moodtunes import create_app
from moodtunes.src.bias import BiasPolicy
from moodtunes.src.errors import ProviderUnavailable
from moodtunes.src.models import MusicAttributes, TrackRecommendation
from moodtunes.src.pipeline import MoodPipeline
from moodtunes.src.recommender import Recommender
from moodtunes.src.sentiment import EmotionClassifier
from moodtunes.src.services.base import ServiceProvider


def raw_track(n):
    return {"id": f"t{n}", "name": f"Track {n}", "artist": f"Artist {n}"}


class FakeProvider(ServiceProvider):
    """Proveedor en memoria: cuenta tokens pedidos y consultas hechas."""

    name = "fake"

    def __init__(self, tracks=None, access_token="tok", expires_in=3600,
                 fail_token=False, search_error=None, configured=True):
        self.tracks = tracks if tracks is not None else [raw_track(i) for i in range(25)]
        self.access_token = access_token
        self.expires_in = expires_in
        self.fail_token = fail_token
        self.search_error = search_error
        self._configured = configured
        self.token_calls = 0
        self.search_calls = []

    @property
    def configured(self):
        return self._configured

    def fetch_token(self):
        self.token_calls += 1
        if self.fail_token:
            raise ProviderUnavailable("token endpoint down")
        return self.access_token, self.expires_in

    def search(self, access_token, params):
        self.search_calls.append((access_token, dict(params)))
        if self.search_error is not None:
            raise self.search_error
        return self.tracks[: params["limit"]]

    def normalize(self, raw, genre=None):
        return TrackRecommendation(
            id=raw["id"], title=raw["name"], artist=raw["artist"], genre=genre, source=self.name
        )


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def classifier():
    return EmotionClassifier(bias_policy=BiasPolicy({}))


@pytest.fixture
def joy_attributes():
    return MusicAttributes(
        valence=0.9, energy=0.9, danceability=0.8, popularity=50,
        genres=("pop", "dance", "funk"), primary_genre="Pop", dominant_emotion="joy",
    )


@pytest.fixture
def mock_pipeline(classifier):
    return MoodPipeline(classifier=classifier, recommender=Recommender(use_mock=True))


@pytest.fixture
def app(mock_pipeline):
    app = create_app(pipeline=mock_pipeline)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
