"""Token cache for OAuth client credentials with a single in-flight refresh."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional, Tuple

from ..errors import ProviderUnavailable

logger = logging.getLogger(__name__)


class TokenCache:
    """Caches (token, expiry) for a fetch callable.

    Concurrent callers serialize on a lock: the first one refreshes, the rest
    reuse its result.
    """

    def __init__(
        self,
        fetch: Callable[[], Tuple[Optional[str], int]],
        skew_seconds: int = 60,
        clock: Callable[[], float] = time.time,
    ):
        self._fetch = fetch
        self._skew = skew_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._token: Optional[str] = None
        self._expires_at: float = 0.0

    @property
    def valid(self) -> bool:
        return bool(self._token) and self._clock() < self._expires_at

    def token(self) -> str:
        with self._lock:
            if self.valid:
                return self._token
            try:
                value, expires_in = self._fetch()
            except ProviderUnavailable:
                raise
            except Exception as exc:
                raise ProviderUnavailable(f"token request failed: {exc}") from exc
            if not value:
                raise ProviderUnavailable("Client credentials response did not return an access token")
            ttl = max(0, int(expires_in or 3600) - self._skew)
            self._token = value
            self._expires_at = self._clock() + ttl
            logger.info("Nuevo token de acceso (expira en %ss)", ttl)
            return self._token

    def invalidate(self) -> None:
        with self._lock:
            self._token = None
            self._expires_at = 0.0
