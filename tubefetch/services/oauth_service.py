"""
Servicio OAuth2 contra Google.
Construye la URL de consentimiento, intercambia el código por un token y
reconstruye credenciales a partir del token persistido.
"""
import logging
from typing import Optional

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request as GoogleRequest
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow

from ..core.config import Settings
from ..core.exceptions import (
    ClientBuildException,
    MissingAuthCodeException,
    TokenExchangeException,
)
from ..schemas import StoredToken
from ..storage.token_store import TokenStore

logger = logging.getLogger(__name__)


class OAuthService:
    """Flujo authorization-code de Google y gestión del token persistido."""

    def __init__(self, settings: Settings, token_store: TokenStore):
        self.settings = settings
        self.token_store = token_store

    def _flow(self) -> Flow:
        if not self.settings.oauth_configured:
            raise ClientBuildException("Faltan GOOGLE_CLIENT_ID / GOOGLE_CLIENT_SECRET")
        return Flow.from_client_config(
            self.settings.google_client_config(),
            scopes=self.settings.OAUTH_SCOPES,
            redirect_uri=self.settings.GOOGLE_REDIRECT_URI,
            state=self.settings.OAUTH_STATE,
            autogenerate_code_verifier=False,
        )

    def authorization_url(self) -> str:
        """
        Construye la URL de la página de consentimiento del proveedor.

        El parámetro state es un valor fijo y no se verifica en el callback.

        Returns:
            URL a la que redirigir al usuario
        """
        url, _ = self._flow().authorization_url(access_type="offline")
        return url

    def exchange_code(self, code: str) -> StoredToken:
        """
        Intercambia el código de autorización por un token.

        Raises:
            TokenExchangeException: Si el proveedor rechaza el intercambio
        """
        flow = self._flow()
        try:
            flow.fetch_token(code=code)
        except Exception as e:
            logger.error(f"Token exchange failed: {e}")
            raise TokenExchangeException(str(e))
        return self.token_from_credentials(flow.credentials)

    def complete_authorization(self, code: Optional[str]) -> StoredToken:
        """
        Procesa el callback: valida el código, lo intercambia y persiste el token.

        Raises:
            MissingAuthCodeException: Si no llega código
            TokenExchangeException: Si falla el intercambio
            TokenStoreException: Si no se puede escribir el token
        """
        if not code:
            raise MissingAuthCodeException()
        token = self.exchange_code(code)
        self.token_store.save(token)
        return token

    def credentials(self) -> Credentials:
        """
        Carga el token persistido y construye credenciales autenticadas.

        Si el token expiró y hay refresh token, se refresca y se vuelve a guardar.

        Raises:
            TokenNotFoundException: Si no hay token persistido
            TokenStoreException: Si el token no se puede leer
            ClientBuildException: Si el refresco falla
        """
        token = self.token_store.load()
        credentials = self.credentials_from_token(token)

        if credentials.expired and credentials.refresh_token:
            try:
                credentials.refresh(GoogleRequest())
            except GoogleAuthError as e:
                logger.error(f"Token refresh failed: {e}")
                raise ClientBuildException(str(e))
            self.token_store.save(self.token_from_credentials(credentials))
            logger.info("OAuth2 token refreshed")

        return credentials

    def credentials_from_token(self, token: StoredToken) -> Credentials:
        """Construye Credentials de google-auth a partir del token persistido."""
        client_config = self.settings.google_client_config()["web"]
        return Credentials(
            token=token.access_token,
            refresh_token=token.refresh_token,
            token_uri=client_config["token_uri"],
            client_id=client_config["client_id"] or None,
            client_secret=client_config["client_secret"] or None,
            scopes=self.settings.OAUTH_SCOPES,
            expiry=token.expiry,
        )

    @staticmethod
    def token_from_credentials(credentials: Credentials) -> StoredToken:
        """Extrae el token persistible de unas Credentials."""
        return StoredToken(
            access_token=credentials.token,
            refresh_token=credentials.refresh_token,
            expiry=credentials.expiry,
        )
