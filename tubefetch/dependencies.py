"""
Dependencias de FastAPI.
Todo se construye a partir de la configuración inyectada en app.state.
"""
from fastapi import Depends, Request

from .core.config import Settings
from .core.enums import Variant
from .services.download_orchestrator import DownloadOrchestrator, ServiceFactory
from .services.oauth_service import OAuthService
from .services.youtube_api_service import YouTubeApiService
from .services.ytdlp_service import YtDlpRetrievalService
from .storage.media import MediaStore
from .storage.token_store import TokenStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_variant(request: Request) -> Variant:
    return request.app.state.variant


def get_token_store(settings: Settings = Depends(get_settings)) -> TokenStore:
    return TokenStore(settings.TOKEN_FILE)


def get_media_store(settings: Settings = Depends(get_settings)) -> MediaStore:
    return MediaStore(settings.DOWNLOAD_DIR, settings.DOWNLOAD_DIR_MODE)


def get_oauth_service(
    settings: Settings = Depends(get_settings),
    token_store: TokenStore = Depends(get_token_store),
) -> OAuthService:
    return OAuthService(settings, token_store)


def get_service_factory(
    variant: Variant = Depends(get_variant),
    settings: Settings = Depends(get_settings),
) -> ServiceFactory:
    """Backend de obtención según la variante."""
    if variant == Variant.PLATFORM:
        return YouTubeApiService

    def factory(credentials):
        return YtDlpRetrievalService(credentials, chunk_size=settings.STREAM_CHUNK_SIZE)

    return factory


def get_download_orchestrator(
    variant: Variant = Depends(get_variant),
    settings: Settings = Depends(get_settings),
    media_store: MediaStore = Depends(get_media_store),
    oauth_service: OAuthService = Depends(get_oauth_service),
    service_factory: ServiceFactory = Depends(get_service_factory),
) -> DownloadOrchestrator:
    return DownloadOrchestrator(
        variant=variant,
        media_store=media_store,
        service_factory=service_factory,
        oauth_service=oauth_service if variant.requires_auth else None,
        extension=settings.DOWNLOAD_EXTENSION,
    )
