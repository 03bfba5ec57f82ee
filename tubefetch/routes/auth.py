"""
Rutas del flujo OAuth2 (variantes library y platform).
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from ..core.exceptions import TubeFetchException
from ..dependencies import get_oauth_service
from ..services.oauth_service import OAuthService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.get("/auth")
def auth(oauth_service: OAuthService = Depends(get_oauth_service)):
    """
    Redirige a la página de consentimiento del proveedor.
    """
    try:
        return RedirectResponse(url=oauth_service.authorization_url(), status_code=302)
    except TubeFetchException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))


@router.get("/oauth2callback")
def oauth2_callback(
    code: Optional[str] = None,
    oauth_service: OAuthService = Depends(get_oauth_service),
):
    """
    Intercambia el código por un token, lo persiste y redirige a /download.
    El parámetro state no se verifica.
    """
    try:
        oauth_service.complete_authorization(code)
    except TubeFetchException as e:
        logger.error(f"OAuth2 callback failed: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return RedirectResponse(url="/download", status_code=302)
