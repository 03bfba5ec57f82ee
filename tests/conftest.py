from datetime import datetime, timedelta
from typing import Iterable, List, Optional

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient

from tubefetch.api import create_app
from tubefetch.core.config import Settings
from tubefetch.core.exceptions import TokenExchangeException
from tubefetch.dependencies import get_oauth_service, get_service_factory, get_settings, get_token_store
from tubefetch.schemas import StoredToken, VideoFormat, VideoMetadata
from tubefetch.services.base_retrieval_service import BaseRetrievalService
from tubefetch.services.oauth_service import OAuthService
from tubefetch.storage.token_store import TokenStore


class FakeRetrievalService(BaseRetrievalService):
    """Backend en memoria: devuelve metadatos fijos y un stream de chunks fijo."""

    def __init__(self, video: VideoMetadata, chunks: Iterable[bytes] = (), error: Exception = None):
        self.video = video
        self.chunks = list(chunks)
        self.error = error
        self.fetched: List[str] = []
        self.streamed: List[VideoFormat] = []

    def get_source_name(self) -> str:
        return "fake"

    def fetch_metadata(self, target: str) -> VideoMetadata:
        self.fetched.append(target)
        if self.error is not None:
            raise self.error
        return self.video

    def open_stream(self, video, fmt):
        self.streamed.append(fmt)
        return iter(self.chunks)


class RecordingFactory:
    """Factory de servicios que registra las credenciales recibidas."""

    def __init__(self, service: BaseRetrievalService):
        self.service = service
        self.credentials = []

    def __call__(self, credentials):
        self.credentials.append(credentials)
        return self.service


class FakeOAuthService(OAuthService):
    """OAuthService cuyo intercambio de código no sale a la red."""

    token: Optional[StoredToken] = None

    def exchange_code(self, code: str) -> StoredToken:
        if self.token is None:
            raise TokenExchangeException("invalid_grant")
        return self.token


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DOWNLOAD_DIR=tmp_path / "downloads",
        TOKEN_FILE=tmp_path / "token.json",
        GOOGLE_CLIENT_ID="client-id.apps.googleusercontent.com",
        GOOGLE_CLIENT_SECRET="client-secret",
        GOOGLE_REDIRECT_URI="http://localhost:8000/oauth2callback",
        LOG_FILE=None,
    )


@pytest.fixture
def valid_token():
    return StoredToken(
        access_token="ya29.access",
        refresh_token="1//refresh",
        expiry=datetime.utcnow().replace(microsecond=0) + timedelta(hours=1),
    )


@pytest.fixture
def seed_token(settings, valid_token):
    TokenStore(settings.TOKEN_FILE).save(valid_token)
    return valid_token


@pytest.fixture
def sample_video():
    return VideoMetadata(
        video_id="abc123",
        title="My Test Video",
        formats=[
            VideoFormat(format_id="18", height=480, has_audio=True, url="https://media.example/18"),
        ],
    )


@pytest.fixture
def make_client(settings):
    """Construye un TestClient de una variante con overrides opcionales."""
    clients = []

    def _make(variant, factory=None, oauth_token=None):
        app = create_app(variant, settings)
        if factory is not None:
            app.dependency_overrides[get_service_factory] = lambda: factory

        def fake_oauth(
            app_settings: Settings = Depends(get_settings),
            token_store: TokenStore = Depends(get_token_store),
        ):
            service = FakeOAuthService(app_settings, token_store)
            service.token = oauth_token
            return service

        app.dependency_overrides[get_oauth_service] = fake_oauth
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
