"""
Services module initialization.
"""
from .base_retrieval_service import BaseRetrievalService
from .ytdlp_service import YtDlpRetrievalService
from .youtube_api_service import YouTubeApiService
from .oauth_service import OAuthService
from .download_orchestrator import DownloadOrchestrator

__all__ = [
    "BaseRetrievalService",
    "YtDlpRetrievalService",
    "YouTubeApiService",
    "OAuthService",
    "DownloadOrchestrator",
]
