from typing import Optional


class MoodTunesError(RuntimeError):
    """Base para errores internos del pipeline de recomendación."""


class ClassificationDegraded(MoodTunesError):
    """El motor de patrones falló o produjo un vector inválido."""


class ProviderUnavailable(MoodTunesError):
    """Token o consulta al proveedor externo fallaron (red, auth, timeout, payload vacío)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
