"""
Servicio base de obtención de videos.
Define la interfaz común de los backends de metadatos y streams.
"""
from abc import ABC, abstractmethod
from typing import Iterable

from ..schemas import VideoFormat, VideoMetadata


class BaseRetrievalService(ABC):
    """
    Servicio base abstracto para backends de video.
    Cada petición construye su propia instancia; no se comparte estado entre peticiones.
    """

    @abstractmethod
    def get_source_name(self) -> str:
        """Retorna el nombre del backend ('ytdlp' o 'youtube_api')."""
        pass

    @abstractmethod
    def fetch_metadata(self, target: str) -> VideoMetadata:
        """
        Obtiene los metadatos del video.

        Args:
            target: URL completa o ID del video, según el backend

        Returns:
            VideoMetadata con título y formatos disponibles

        Raises:
            MetadataFetchException: Si el backend falla
            VideoNotFoundException: Si el video no existe
        """
        pass

    @abstractmethod
    def open_stream(self, video: VideoMetadata, fmt: VideoFormat) -> Iterable[bytes]:
        """
        Abre el stream de bytes del formato elegido.

        Returns:
            Iterable de chunks de bytes

        Raises:
            DownloadFailedException: Si el stream no se puede abrir
        """
        pass
