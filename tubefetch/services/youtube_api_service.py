"""
Servicio de metadatos con la API oficial de YouTube (Data API v3).
La API no expone los bytes del video: la descarga no está implementada.
"""
import logging
from typing import Iterable

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from .base_retrieval_service import BaseRetrievalService
from ..core.constants import YOUTUBE_API_PARTS, YOUTUBE_API_SERVICE_NAME, YOUTUBE_API_VERSION
from ..core.exceptions import (
    DownloadNotImplementedException,
    MetadataFetchException,
    VideoNotFoundException,
)
from ..schemas import VideoFormat, VideoMetadata

logger = logging.getLogger(__name__)


class YouTubeApiService(BaseRetrievalService):
    """Backend basado en la YouTube Data API, siempre autenticado."""

    def __init__(self, credentials: Credentials):
        self.credentials = credentials

    def get_source_name(self) -> str:
        """Retorna 'youtube_api'."""
        return "youtube_api"

    def _client(self):
        return build(
            YOUTUBE_API_SERVICE_NAME,
            YOUTUBE_API_VERSION,
            credentials=self.credentials,
            cache_discovery=False,
        )

    def fetch_metadata(self, target: str) -> VideoMetadata:
        """
        Consulta videos.list para un ID.

        Args:
            target: ID del video (no la URL)

        Raises:
            VideoNotFoundException: Si la API no devuelve items
            MetadataFetchException: Si la llamada falla
        """
        try:
            response = self._client().videos().list(part=YOUTUBE_API_PARTS, id=target).execute()
        except HttpError as e:
            logger.error(f"YouTube API error for {target}: {e}")
            raise MetadataFetchException(url=target, reason=str(e))

        items = response.get("items") or []
        if not items:
            raise VideoNotFoundException(video_id=target)

        title = items[0].get("snippet", {}).get("title") or target
        logger.info(f"Fetched metadata for '{title}' from YouTube API")
        return VideoMetadata(video_id=target, title=title)

    def open_stream(self, video: VideoMetadata, fmt: VideoFormat = None) -> Iterable[bytes]:
        """Siempre falla: la API oficial no permite descargar el video."""
        raise DownloadNotImplementedException()
