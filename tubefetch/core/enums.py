"""
Enumeraciones utilizadas en la aplicación.
Centraliza los estados y tipos para evitar strings mágicos.
"""
from enum import Enum


class Variant(str, Enum):
    """Variantes de servicio. Cada una corre como proceso independiente."""
    LIBRARY = "library"
    PLATFORM = "platform"
    DIRECT = "direct"

    @property
    def requires_auth(self) -> bool:
        """Las variantes library y platform necesitan un token OAuth2."""
        return self in (Variant.LIBRARY, Variant.PLATFORM)


class HealthStatus(str, Enum):
    """Estados del health check."""
    OK = "ok"
    DEGRADED = "degraded"
