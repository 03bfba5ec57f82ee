"""
Modelos de datos de la aplicación.
Define los esquemas de entrada/salida y modelos de dominio.
"""
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# === Request Models ===

class DownloadRequest(BaseModel):
    """Modelo de solicitud para descargar un video."""
    url: str = Field(..., description="URL del video a descargar")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "url": "https://www.youtube.com/watch?v=..."
            }
        }
    )


# === Response Models ===

class DownloadResponse(BaseModel):
    """Respuesta de la variante library tras guardar el archivo."""
    message: str = Field(..., description="Mensaje descriptivo")
    url: str = Field(..., description="Ruta relativa para descargar el archivo")


class HealthResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general: ok o degraded")
    variant: str = Field(..., description="Variante del servicio")
    download_dir: dict = Field(..., description="Estado del directorio de descargas")
    token_present: Optional[bool] = Field(None, description="Si existe el archivo de token")


# === Domain Models ===

class StoredToken(BaseModel):
    """Token OAuth2 persistido en disco."""
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "Bearer"
    # UTC naive, igual que google.oauth2.credentials.Credentials.expiry
    expiry: Optional[datetime] = None

    @field_validator("expiry")
    @classmethod
    def expiry_as_naive_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Convierte expiraciones con zona horaria (ej: "...Z") a UTC naive."""
        if v is not None and v.tzinfo is not None:
            return v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class VideoFormat(BaseModel):
    """Variante de stream disponible para un video."""
    format_id: str
    height: int = 0
    has_audio: bool = False
    url: Optional[str] = None
    ext: Optional[str] = None
    http_headers: Dict[str, str] = Field(default_factory=dict)


class VideoMetadata(BaseModel):
    """Metadatos mínimos de un video."""
    video_id: str
    title: str
    formats: List[VideoFormat] = Field(default_factory=list)


class DownloadResult(BaseModel):
    """Resultado de una descarga persistida en disco."""
    filename: str
    path: str
    size_bytes: int
