"""
Gestor del directorio de descargas.
Crea el directorio, resuelve rutas y copia streams a disco.
"""
import logging
import os
from pathlib import Path
from typing import Callable, Iterable

from ..core.exceptions import (
    DownloadFailedException,
    FileNotFoundException,
    TubeFetchException,
    UnauthorizedPathException,
)
from ..schemas import DownloadResult

logger = logging.getLogger(__name__)


class MediaStore:
    """
    Directorio de descargas.
    Sin manejo de colisiones: un archivo con el mismo nombre se sobrescribe.
    """

    def __init__(self, directory: Path, mode: int = 0o755):
        """
        Args:
            directory: Directorio donde se guardan los videos
            mode: Permisos con los que se crea el directorio
        """
        self.directory = Path(directory)
        self.mode = mode

    def ensure_directory(self) -> None:
        """
        Crea el directorio de descargas si no existe.

        Raises:
            OSError: Si no se puede crear (fatal en el arranque)
        """
        if self.directory.is_dir():
            return
        self.directory.mkdir(mode=self.mode, parents=True)
        logger.info(f"Created downloads directory: {self.directory}")

    def is_writable(self) -> bool:
        """Indica si el directorio existe y se puede escribir."""
        return self.directory.is_dir() and os.access(self.directory, os.W_OK)

    def path_for(self, filename: str) -> Path:
        """
        Resuelve la ruta de un archivo dentro del directorio de descargas.

        Raises:
            UnauthorizedPathException: Si la ruta sale del directorio
        """
        path = self.directory / filename
        try:
            path.resolve().relative_to(self.directory.resolve())
        except ValueError:
            raise UnauthorizedPathException(path=filename)
        return path

    def existing_path(self, filename: str) -> Path:
        """
        Igual que path_for, pero exige que el archivo exista.

        Raises:
            FileNotFoundException: Si el archivo no existe
        """
        path = self.path_for(filename)
        if not path.is_file():
            raise FileNotFoundException(filename=filename)
        return path

    def save_stream(
        self,
        filename: str,
        open_stream: Callable[[], Iterable[bytes]],
    ) -> DownloadResult:
        """
        Crea el archivo destino y copia en él el stream.

        El archivo se crea antes de abrir el stream; si algo falla a mitad de
        la copia queda un archivo truncado en disco.

        Args:
            filename: Nombre del archivo destino
            open_stream: Función que abre el stream y devuelve sus chunks

        Returns:
            DownloadResult con la ruta y el tamaño escrito

        Raises:
            DownloadFailedException: Si falla la creación, el stream o la copia
        """
        path = self.path_for(filename)

        try:
            file = open(path, "wb")
        except OSError as e:
            logger.error(f"Error creating file {path}: {e}")
            raise DownloadFailedException(path=str(path), reason=f"Error al crear el archivo: {e}")

        written = 0
        with file:
            try:
                chunks = open_stream()
                try:
                    for chunk in chunks:
                        if chunk:
                            file.write(chunk)
                            written += len(chunk)
                finally:
                    close = getattr(chunks, "close", None)
                    if close is not None:
                        close()
            except TubeFetchException:
                raise
            except Exception as e:
                logger.error(f"Error saving video to {path}: {e}")
                raise DownloadFailedException(path=str(path), reason=f"Error al guardar el video: {e}")

        logger.info(f"Saved {written} bytes to {path}")
        return DownloadResult(filename=path.name, path=str(path), size_bytes=written)
