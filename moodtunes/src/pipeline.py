from typing import Any, Dict, Optional, Sequence

from .config import Config
from .mapping import RecommendationMapper
from .models import UserProfile
from .recommender import Recommender
from .sentiment import EmotionClassifier
from .services.spotify_service import SpotifyService


class MoodPipeline:
    """texto -> emociones -> atributos musicales -> pistas."""

    def __init__(
        self,
        classifier: Optional[EmotionClassifier] = None,
        mapper: Optional[RecommendationMapper] = None,
        recommender: Optional[Recommender] = None,
    ):
        self.classifier = classifier or EmotionClassifier()
        self.mapper = mapper or RecommendationMapper()
        self.recommender = recommender or Recommender(provider=SpotifyService())

    def run(
        self,
        text: str,
        user: Optional[UserProfile] = None,
        preferred_genres: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        user_id = user_id or (user.id if user else None)
        genres = list(preferred_genres) if preferred_genres else list(user.preferred_genres if user else [])

        ctx = self.classifier.context(text, user_id)
        emotions = self.classifier.analyze(text, user_id)
        attributes = self.mapper.map_to_attributes(emotions, preferred_genres=genres, raw_text=ctx.text)
        tracks = self.recommender.recommend(attributes, Config.DEFAULT_LIMIT if limit is None else limit)
        return {
            "emotions": emotions,
            "language": ctx.language,
            "attributes": attributes.to_dict(),
            "tracks": [t.to_dict() for t in tracks],
        }
