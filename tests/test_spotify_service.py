import pytest
import requests

from moodtunes.src.config import Config
from moodtunes.src.errors import ProviderUnavailable
from moodtunes.src.services.spotify_service import SpotifyService


class FakeResponse:
    def __init__(self, status_code=200, payload=None, bad_json=False):
        self.status_code = status_code
        self._payload = payload
        self._bad_json = bad_json

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


SPOTIFY_TRACK = {
    "id": "4uLU6hMCjMI75M1A2tKUQC",
    "name": "Never Gonna Give You Up",
    "artists": [{"name": "Rick Astley"}, {"name": "Someone Else"}],
    "album": {"name": "Whenever You Need Somebody"},
    "popularity": 80,
    "preview_url": "https://p.scdn.co/mp3-preview/abc",
    "external_urls": {"spotify": "https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC"},
}


@pytest.fixture
def service():
    return SpotifyService(client_id="cid", client_secret="secret", market="mx", timeout=3)


def test_configured(monkeypatch):
    monkeypatch.setattr(Config, "SPOTIFY_CLIENT_ID", None)
    monkeypatch.setattr(Config, "SPOTIFY_CLIENT_SECRET", None)
    assert SpotifyService(client_id="cid", client_secret="secret").configured
    assert not SpotifyService().configured


def test_fetch_token_without_credentials(monkeypatch):
    monkeypatch.setattr(Config, "SPOTIFY_CLIENT_ID", None)
    monkeypatch.setattr(Config, "SPOTIFY_CLIENT_SECRET", None)
    with pytest.raises(ProviderUnavailable):
        SpotifyService().fetch_token()


def test_fetch_token(monkeypatch, service):
    seen = {}

    def fake_post(url, data=None, auth=None, timeout=None):
        seen.update(url=url, data=data, auth=auth, timeout=timeout)
        return FakeResponse(payload={"access_token": "abc", "expires_in": 1800})

    monkeypatch.setattr(requests, "post", fake_post)
    assert service.fetch_token() == ("abc", 1800)
    assert seen["url"] == Config.SPOTIFY_TOKEN_URL
    assert seen["data"] == {"grant_type": "client_credentials"}
    assert seen["auth"] == ("cid", "secret")
    assert seen["timeout"] == 3


def test_fetch_token_http_error(monkeypatch, service):
    monkeypatch.setattr(requests, "post", lambda *a, **kw: FakeResponse(status_code=400, payload={}))
    with pytest.raises(ProviderUnavailable) as exc:
        service.fetch_token()
    assert exc.value.status_code == 400


def test_fetch_token_timeout(monkeypatch, service):
    def boom(*a, **kw):
        raise requests.Timeout("slow")

    monkeypatch.setattr(requests, "post", boom)
    with pytest.raises(ProviderUnavailable):
        service.fetch_token()


def test_search_sends_targets_and_market(monkeypatch, service):
    seen = {}

    def fake_get(url, headers=None, params=None, timeout=None):
        seen.update(url=url, headers=headers, params=params, timeout=timeout)
        return FakeResponse(payload={"tracks": [SPOTIFY_TRACK]})

    monkeypatch.setattr(requests, "get", fake_get)
    tracks = service.search("tok", {"seed_genres": "pop", "target_valence": 0.8, "limit": 5})
    assert tracks == [SPOTIFY_TRACK]
    assert seen["url"].endswith("/recommendations")
    assert seen["headers"]["Authorization"] == "Bearer tok"
    assert seen["params"]["market"] == "MX"
    assert seen["params"]["target_valence"] == 0.8
    assert seen["timeout"] == 3


@pytest.mark.parametrize("response,status", [
    (FakeResponse(status_code=401, payload={}), 401),
    (FakeResponse(status_code=429, payload={}), 429),
    (FakeResponse(payload={"error": "nope"}), None),
    (FakeResponse(bad_json=True), None),
])
def test_search_failures(monkeypatch, service, response, status):
    monkeypatch.setattr(requests, "get", lambda *a, **kw: response)
    with pytest.raises(ProviderUnavailable) as exc:
        service.search("tok", {"limit": 5})
    assert exc.value.status_code == status


def test_search_connection_error(monkeypatch, service):
    def boom(*a, **kw):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(requests, "get", boom)
    with pytest.raises(ProviderUnavailable):
        service.search("tok", {"limit": 5})


def test_normalize(service):
    track = service.normalize(SPOTIFY_TRACK, "pop")
    assert track.id == SPOTIFY_TRACK["id"]
    assert track.title == "Never Gonna Give You Up"
    assert track.artist == "Rick Astley, Someone Else"
    assert track.album == "Whenever You Need Somebody"
    assert track.genre == "pop"
    assert track.external_url.startswith("https://open.spotify.com/")
    assert track.source == "spotify"


def test_normalize_incomplete(service):
    assert service.normalize({"id": "x", "name": "No artists", "artists": []}) is None
    assert service.normalize("garbage") is None
