"""
Ruta de descarga.
Una sola petición hace todo el trabajo; no hay jobs en segundo plano.
"""
import logging
import urllib.parse

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse, JSONResponse

from ..core.constants import DOWNLOADS_URL_PREFIX, SUCCESS_DOWNLOADED
from ..core.enums import Variant
from ..core.exceptions import TubeFetchException
from ..dependencies import get_download_orchestrator, get_variant
from ..helpers import FileNameHelper
from ..schemas import DownloadRequest, DownloadResponse
from ..services.download_orchestrator import DownloadOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["download"])


def attachment_response(path: str, filename: str) -> FileResponse:
    """
    Sirve un archivo como adjunto con nombre ASCII y variante UTF-8 (RFC 5987).
    """
    ascii_name = FileNameHelper.sanitize_filename_ascii(filename)
    resp = FileResponse(path=path, media_type="video/mp4", filename=ascii_name)
    filename_star = urllib.parse.quote(filename, safe="")
    resp.headers["Content-Disposition"] = (
        f'attachment; filename="{ascii_name}"; filename*=UTF-8\'\'{filename_star}'
    )
    return resp


@router.post("/download")
def download_endpoint(
    payload: DownloadRequest,
    variant: Variant = Depends(get_variant),
    orchestrator: DownloadOrchestrator = Depends(get_download_orchestrator),
):
    """
    Descarga el video indicado en el cuerpo JSON.

    - library: responde JSON con la ruta relativa del archivo
    - direct: responde el archivo como adjunto
    - platform: siempre falla en el paso de descarga
    """
    try:
        result = orchestrator.download(payload.url)
    except TubeFetchException as e:
        logger.error(f"Download failed for {payload.url!r}: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error downloading {payload.url!r}")
        raise HTTPException(status_code=500, detail=str(e))

    if variant == Variant.DIRECT:
        return attachment_response(result.path, result.filename)

    response = DownloadResponse(
        message=SUCCESS_DOWNLOADED,
        url=f"{DOWNLOADS_URL_PREFIX}/{result.filename}",
    )
    return JSONResponse(status_code=200, content=response.model_dump())
