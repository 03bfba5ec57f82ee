"""
Configuración centralizada de la aplicación.
Los valores se leen del entorno al instanciar Settings (main.py carga .env antes).
Ninguna credencial vive en el código fuente.
"""
import os
from pathlib import Path
from typing import List, Optional

from .enums import Variant


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (ValueError, TypeError):
        return default


class Settings:
    """Configuración de la aplicación, inyectada en create_app()."""

    # API Info
    APP_TITLE: str = "TubeFetch API"
    APP_DESCRIPTION: str = "Servicio HTTP mínimo para descargar videos de YouTube a disco local"
    APP_VERSION: str = "1.0.0"

    # Extensión fija de los archivos descargados
    DOWNLOAD_EXTENSION: str = ".mp4"

    # Permisos del directorio de descargas (rwxr-xr-x)
    DOWNLOAD_DIR_MODE: int = 0o755

    def __init__(self, **overrides):
        """
        Args:
            **overrides: Valores que reemplazan a los leídos del entorno
        """
        base_dir = Path(os.getcwd())

        # Servidor
        self.HOST: str = os.getenv("TUBEFETCH_HOST", "0.0.0.0")
        self.PORT: int = _env_int("TUBEFETCH_PORT", 8000)
        self.RELOAD: bool = _env_bool("TUBEFETCH_RELOAD", False)
        self.WORKERS: int = _env_int("TUBEFETCH_WORKERS", 1)
        self.VARIANT: Variant = Variant(os.getenv("TUBEFETCH_VARIANT", Variant.LIBRARY.value))

        # Estado persistido
        self.DOWNLOAD_DIR: Path = Path(os.getenv("TUBEFETCH_DOWNLOAD_DIR", str(base_dir / "downloads")))
        self.TOKEN_FILE: Path = Path(os.getenv("TUBEFETCH_TOKEN_FILE", str(base_dir / "token.json")))

        # OAuth2 (Google)
        self.GOOGLE_CLIENT_ID: str = os.getenv("GOOGLE_CLIENT_ID", "")
        self.GOOGLE_CLIENT_SECRET: str = os.getenv("GOOGLE_CLIENT_SECRET", "")
        self.GOOGLE_REDIRECT_URI: str = os.getenv(
            "GOOGLE_REDIRECT_URI", "http://localhost:8000/oauth2callback"
        )
        self.OAUTH_SCOPES: List[str] = os.getenv(
            "GOOGLE_OAUTH_SCOPES", "https://www.googleapis.com/auth/youtube.readonly"
        ).split()
        self.OAUTH_STATE: str = os.getenv("GOOGLE_OAUTH_STATE", "state-token")

        # Descarga
        self.STREAM_CHUNK_SIZE: int = _env_int("TUBEFETCH_CHUNK_SIZE", 1024 * 1024)

        # Logging
        self.LOG_LEVEL: str = os.getenv("TUBEFETCH_LOG_LEVEL", "INFO").upper()
        log_file = os.getenv("TUBEFETCH_LOG_FILE")
        self.LOG_FILE: Optional[Path] = Path(log_file) if log_file else None

        for key, value in overrides.items():
            if not key.isupper():
                raise AttributeError(f"Configuración desconocida: {key}")
            setattr(self, key, value)

    @property
    def oauth_configured(self) -> bool:
        """Indica si hay credenciales de cliente OAuth2 configuradas."""
        return bool(self.GOOGLE_CLIENT_ID and self.GOOGLE_CLIENT_SECRET)

    def google_client_config(self) -> dict:
        """
        Construye la configuración de cliente en el formato que espera google-auth-oauthlib.

        Returns:
            dict con la clave 'web'
        """
        return {
            "web": {
                "client_id": self.GOOGLE_CLIENT_ID,
                "client_secret": self.GOOGLE_CLIENT_SECRET,
                "auth_uri": "https://accounts.google.com/o/oauth2/auth",
                "token_uri": "https://oauth2.googleapis.com/token",
                "redirect_uris": [self.GOOGLE_REDIRECT_URI],
            }
        }
