"""
Servicio de obtención de videos con yt-dlp.
yt-dlp resuelve metadatos y URLs de stream; los bytes se copian con requests.
"""
import logging
from typing import Iterator, Optional

import requests
import yt_dlp
from yt_dlp.utils import DownloadError
from google.auth.transport.requests import AuthorizedSession
from google.oauth2.credentials import Credentials

from .base_retrieval_service import BaseRetrievalService
from ..core.constants import YTDLP_BASE_OPTIONS
from ..core.exceptions import DownloadFailedException, MetadataFetchException
from ..schemas import VideoFormat, VideoMetadata
from ..validators import URLValidator

logger = logging.getLogger(__name__)


class YtDlpRetrievalService(BaseRetrievalService):
    """Backend basado en la librería yt-dlp, con o sin credenciales OAuth2."""

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        chunk_size: int = 1024 * 1024,
    ):
        """
        Args:
            credentials: Credenciales OAuth2 (variante library) o None (variante direct)
            chunk_size: Tamaño de chunk al copiar el stream
        """
        self.credentials = credentials
        self.chunk_size = chunk_size
        self.session = requests.Session()
        self.authorized_session = AuthorizedSession(credentials) if credentials is not None else None

    def get_source_name(self) -> str:
        """Retorna 'ytdlp'."""
        return "ytdlp"

    def build_options(self, target: str) -> dict:
        """
        Construye las opciones de yt-dlp para una URL.

        El header Authorization solo se agrega si hay credenciales y la URL es de
        YouTube; yt-dlp lo enviaría a cualquier host que visite.
        """
        options = dict(YTDLP_BASE_OPTIONS)
        if (
            self.credentials is not None
            and self.credentials.token
            and URLValidator.extract_video_id(target)
        ):
            options["http_headers"] = {"Authorization": f"Bearer {self.credentials.token}"}
        return options

    def session_for(self, url: str) -> requests.Session:
        """Sesión autorizada para hosts de Google, sesión sin token para el resto."""
        if self.authorized_session is not None and URLValidator.is_google_host(url):
            return self.authorized_session
        return self.session

    def fetch_metadata(self, target: str) -> VideoMetadata:
        """
        Extrae metadatos con yt-dlp sin descargar.

        Args:
            target: URL del video tal como llegó en la petición
        """
        try:
            with yt_dlp.YoutubeDL(self.build_options(target)) as ydl:
                info = ydl.extract_info(target, download=False)
        except DownloadError as e:
            logger.error(f"yt-dlp extraction failed for {target}: {e}")
            raise MetadataFetchException(url=target, reason=str(e))

        if not info:
            raise MetadataFetchException(url=target, reason="yt-dlp no devolvió información")

        video = self.parse_info(info)
        logger.info(f"Fetched metadata for '{video.title}' ({len(video.formats)} formats)")
        return video

    @staticmethod
    def parse_info(info: dict) -> VideoMetadata:
        """Convierte el dict de yt-dlp en VideoMetadata, conservando el orden de formatos."""
        formats = []
        for f in info.get("formats") or []:
            acodec = f.get("acodec")
            formats.append(VideoFormat(
                format_id=str(f.get("format_id", "")),
                height=f.get("height") or 0,
                has_audio=acodec is not None and acodec != "none",
                url=f.get("url"),
                ext=f.get("ext"),
                http_headers={k: str(v) for k, v in (f.get("http_headers") or {}).items()},
            ))

        video_id = str(info.get("id") or "")
        return VideoMetadata(
            video_id=video_id,
            title=info.get("title") or video_id,
            formats=formats,
        )

    def open_stream(self, video: VideoMetadata, fmt: VideoFormat) -> Iterator[bytes]:
        """Abre la URL del formato y devuelve un iterador de chunks."""
        if not fmt.url:
            raise DownloadFailedException(reason=f"El formato {fmt.format_id} no tiene URL de stream")

        try:
            response = self.session_for(fmt.url).get(fmt.url, headers=fmt.http_headers, stream=True)
        except requests.RequestException as e:
            raise DownloadFailedException(reason=f"Error al descargar el video: {e}")

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            response.close()
            raise DownloadFailedException(reason=f"Error al descargar el video: {e}")

        logger.debug(f"Streaming format {fmt.format_id} ({fmt.height}p) of {video.video_id}")
        return self._iter_response(response)

    def _iter_response(self, response: requests.Response) -> Iterator[bytes]:
        try:
            for chunk in response.iter_content(chunk_size=self.chunk_size):
                yield chunk
        finally:
            response.close()
