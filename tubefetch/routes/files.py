"""
Ruta para servir archivos ya descargados (variante library).
"""
from fastapi import APIRouter, Depends, HTTPException

from ..core.constants import DOWNLOADS_URL_PREFIX
from ..core.exceptions import TubeFetchException
from ..dependencies import get_media_store
from ..storage.media import MediaStore
from .download import attachment_response

router = APIRouter(tags=["files"])


@router.get(DOWNLOADS_URL_PREFIX + "/{filename}")
def serve_file(filename: str, media_store: MediaStore = Depends(get_media_store)):
    """
    Sirve un archivo del directorio de descargas.
    Seguridad: solo sirve archivos bajo el directorio de descargas.
    """
    try:
        path = media_store.existing_path(filename)
    except TubeFetchException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))

    return attachment_response(str(path), path.name)
