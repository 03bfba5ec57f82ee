"""
Validadores de entrada de la aplicación.
"""
from urllib.parse import parse_qs, urlparse

from .core.constants import (
    ERROR_EMPTY_URL,
    GOOGLE_TOKEN_HOSTS,
    YOUTUBE_SHORT_HOSTS,
    YOUTUBE_WATCH_HOSTS,
    YOUTUBE_WATCH_PATH,
    YOUTUBE_VIDEO_ID_PARAM,
)
from .core.exceptions import InvalidURLException


class URLValidator:
    """Validador de URLs de video."""

    @staticmethod
    def validate_url(url: str) -> str:
        """
        Valida que la URL no esté vacía.

        Args:
            url: URL recibida en el cuerpo de la petición

        Returns:
            URL sin espacios al inicio o al final

        Raises:
            InvalidURLException: Si la URL está vacía o solo contiene espacios
        """
        if not url or not isinstance(url, str) or not url.strip():
            raise InvalidURLException(reason=ERROR_EMPTY_URL)
        return url.strip()

    @staticmethod
    def extract_video_id(url: str) -> str:
        """
        Extrae el ID de video de una URL de YouTube.

        Soporta dos formas:
        - https://youtu.be/<id>
        - https://www.youtube.com/watch?v=<id>

        Args:
            url: URL de YouTube

        Returns:
            ID del video, o cadena vacía si la URL no tiene una forma reconocida
        """
        if not url or not isinstance(url, str):
            return ""

        try:
            parsed = urlparse(url.strip())
        except ValueError:
            return ""

        host = (parsed.hostname or "").lower()

        if host in YOUTUBE_SHORT_HOSTS:
            segments = [s for s in parsed.path.split("/") if s]
            return segments[0] if segments else ""

        if host in YOUTUBE_WATCH_HOSTS and parsed.path.rstrip("/") == YOUTUBE_WATCH_PATH:
            values = parse_qs(parsed.query).get(YOUTUBE_VIDEO_ID_PARAM)
            return values[0] if values else ""

        return ""

    @staticmethod
    def is_google_host(url: str) -> bool:
        """Indica si la URL apunta a un dominio de Google (o subdominio) apto para el token."""
        try:
            host = (urlparse(url or "").hostname or "").lower()
        except ValueError:
            return False
        return any(host == d or host.endswith(f".{d}") for d in GOOGLE_TOKEN_HOSTS)

    @staticmethod
    def require_video_id(url: str) -> str:
        """
        Igual que extract_video_id pero lanza excepción si no hay ID.

        Raises:
            InvalidURLException: Si no se pudo extraer un ID
        """
        video_id = URLValidator.extract_video_id(url)
        if not video_id:
            raise InvalidURLException(url=url, reason="No se pudo extraer el ID del video")
        return video_id
