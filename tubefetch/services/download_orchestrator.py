"""
Orchestrator que coordina el flujo completo de descarga.
Flujo lineal: validar → cliente → metadatos → formato → archivo → stream.
"""
import logging
from typing import Callable, Optional

from google.oauth2.credentials import Credentials

from .base_retrieval_service import BaseRetrievalService
from .oauth_service import OAuthService
from ..core.config import Settings
from ..core.enums import Variant
from ..core.exceptions import ClientBuildException
from ..helpers import FileNameHelper, FormatSelector
from ..schemas import DownloadResult
from ..storage.media import MediaStore
from ..validators import URLValidator

logger = logging.getLogger(__name__)

ServiceFactory = Callable[[Optional[Credentials]], BaseRetrievalService]


class DownloadOrchestrator:
    """
    Orquesta una descarga completa dentro de una petición.

    Responsabilidades:
    - Validar la URL recibida
    - Obtener el cliente (autenticado o no, según la variante)
    - Elegir el formato y persistir los bytes
    """

    def __init__(
        self,
        variant: Variant,
        media_store: MediaStore,
        service_factory: ServiceFactory,
        oauth_service: Optional[OAuthService] = None,
        extension: str = Settings.DOWNLOAD_EXTENSION,
    ):
        self.variant = variant
        self.media_store = media_store
        self.service_factory = service_factory
        self.oauth_service = oauth_service
        self.extension = extension

    def build_service(self) -> BaseRetrievalService:
        """
        Construye el backend de la variante, con credenciales si hacen falta.

        Raises:
            TokenNotFoundException, TokenStoreException, ClientBuildException
        """
        credentials = None
        if self.variant.requires_auth:
            if self.oauth_service is None:
                raise ClientBuildException("Servicio OAuth2 no configurado")
            credentials = self.oauth_service.credentials()
        return self.service_factory(credentials)

    def download(self, url: str) -> DownloadResult:
        """
        Descarga el video de la URL al directorio de descargas.

        Args:
            url: URL recibida en el cuerpo de la petición

        Returns:
            DownloadResult del archivo guardado

        Raises:
            TubeFetchException: Cualquier fallo, con su código HTTP asociado
        """
        url = URLValidator.validate_url(url)

        if self.variant == Variant.PLATFORM:
            return self._download_from_platform(url)

        service = self.build_service()
        video = service.fetch_metadata(url)

        fmt = FormatSelector.best_audio_format(video.formats)
        logger.info(f"Selected format {fmt.format_id} ({fmt.height}p) for '{video.title}'")

        filename = FileNameHelper.download_filename(video.title, self.extension)
        result = self.media_store.save_stream(filename, lambda: service.open_stream(video, fmt))
        logger.info(f"Video downloaded: {result.filename} ({result.size_bytes} bytes)")
        return result

    def _download_from_platform(self, url: str) -> DownloadResult:
        """Variante platform: metadatos por ID con la API oficial; la descarga siempre falla."""
        video_id = URLValidator.require_video_id(url)

        service = self.build_service()
        video = service.fetch_metadata(video_id)
        filename = FileNameHelper.download_filename(video.title, self.extension)

        # La API oficial no entrega bytes: open_stream lanza antes de crear el archivo
        chunks = service.open_stream(video, None)
        return self.media_store.save_stream(filename, lambda: chunks)
