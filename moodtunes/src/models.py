from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


EmotionVector = Dict[str, float]


@dataclass(frozen=True)
class AnalysisContext:
    text: str
    user_id: Optional[str]
    language: str


@dataclass(frozen=True)
class UserProfile:
    id: str
    name: str = ""
    preferred_genres: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserProfile":
        genres = data.get("preferred_genres") or data.get("preferredGenres") or []
        return cls(
            id=str(data.get("id") or ""),
            name=str(data.get("name") or ""),
            preferred_genres=tuple(str(g).lower() for g in genres),
        )


@dataclass(frozen=True)
class MusicAttributes:
    valence: float
    energy: float
    danceability: float
    popularity: int
    genres: Tuple[str, ...] = ()
    primary_genre: str = "Pop"
    dominant_emotion: str = "joy"
    is_spanish: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valence": self.valence,
            "energy": self.energy,
            "danceability": self.danceability,
            "popularity": self.popularity,
            "genres": list(self.genres),
            "primaryGenre": self.primary_genre,
            "dominantEmotion": self.dominant_emotion,
            "isSpanish": self.is_spanish,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MusicAttributes":
        """Acepta tanto claves camelCase (JSON) como snake_case."""
        def pick(*keys, default=None):
            for key in keys:
                if key in data and data[key] is not None:
                    return data[key]
            return default

        return cls(
            valence=float(pick("valence", default=0.5)),
            energy=float(pick("energy", default=0.5)),
            danceability=float(pick("danceability", default=0.5)),
            popularity=int(pick("popularity", default=50)),
            genres=tuple(str(g) for g in (pick("genres", default=[]) or [])),
            primary_genre=str(pick("primaryGenre", "primary_genre", default="Pop")),
            dominant_emotion=str(pick("dominantEmotion", "dominant_emotion", default="joy")),
            is_spanish=bool(pick("isSpanish", "is_spanish", default=False)),
        )


@dataclass(frozen=True)
class TrackRecommendation:
    id: str
    title: str
    artist: str
    album: Optional[str] = None
    genre: Optional[str] = None
    popularity: Optional[int] = None
    preview_url: Optional[str] = None
    external_url: Optional[str] = None
    source: str = "mock"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "genre": self.genre,
            "popularity": self.popularity,
            "previewUrl": self.preview_url,
            "externalUrl": self.external_url,
            "source": self.source,
        }
