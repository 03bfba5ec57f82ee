"""
Almacén del token OAuth2.
Un único archivo JSON en una ruta conocida; sin cifrado ni rotación.
"""
import logging
from pathlib import Path

from pydantic import ValidationError

from ..core.exceptions import TokenNotFoundException, TokenStoreException
from ..schemas import StoredToken

logger = logging.getLogger(__name__)


class TokenStore:
    """
    Persistencia del token OAuth2.
    Se crea en el primer callback exitoso y se sobrescribe en cada callback posterior.
    """

    def __init__(self, path: Path):
        """
        Args:
            path: Ruta del archivo de token
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Indica si el archivo de token existe."""
        return self.path.is_file()

    def load(self) -> StoredToken:
        """
        Lee el token desde disco.

        Returns:
            Token persistido

        Raises:
            TokenNotFoundException: Si el archivo no existe
            TokenStoreException: Si el archivo no se puede leer o decodificar
        """
        if not self.exists():
            raise TokenNotFoundException(path=str(self.path))

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise TokenStoreException("Error al abrir el archivo de token", str(e))

        try:
            token = StoredToken.model_validate_json(raw)
        except ValidationError as e:
            raise TokenStoreException("Error al decodificar el token", str(e))

        logger.debug(f"Token loaded from {self.path}")
        return token

    def save(self, token: StoredToken) -> None:
        """
        Escribe el token en disco, sobrescribiendo el anterior.

        Args:
            token: Token a persistir

        Raises:
            TokenStoreException: Si el archivo no se puede escribir
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(token.model_dump_json(), encoding="utf-8")
        except OSError as e:
            raise TokenStoreException("Error al escribir el archivo de token", str(e))

        logger.info(f"Token saved to {self.path}")
