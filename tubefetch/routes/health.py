"""
Rutas de health check y bienvenida.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..core.enums import HealthStatus, Variant
from ..dependencies import get_media_store, get_token_store, get_variant
from ..schemas import HealthResponse
from ..storage.media import MediaStore
from ..storage.token_store import TokenStore

router = APIRouter(tags=["Health"])


@router.get("/")
def read_root(variant: Variant = Depends(get_variant)):
    """Endpoint de bienvenida."""
    return JSONResponse(content={"message": "Bienvenido a TubeFetch API", "variant": variant.value})


@router.get("/health", response_model=HealthResponse)
def health_check(
    variant: Variant = Depends(get_variant),
    media_store: MediaStore = Depends(get_media_store),
    token_store: TokenStore = Depends(get_token_store),
):
    """
    Healthcheck que valida el directorio de descargas y la presencia del token.

    Returns:
        200: Directorio de descargas disponible
        503: Directorio de descargas ausente o sin permisos de escritura
    """
    writable = media_store.is_writable()
    status = HealthStatus.OK if writable else HealthStatus.DEGRADED

    content = {
        "status": status.value,
        "variant": variant.value,
        "download_dir": {"path": str(media_store.directory), "writable": writable},
        "token_present": token_store.exists() if variant.requires_auth else None,
    }

    return JSONResponse(status_code=200 if writable else 503, content=content)
