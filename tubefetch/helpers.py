"""
Utilidades y helpers de la aplicación.
Funciones auxiliares para nombres de archivo y selección de formatos.
"""
import re
import unicodedata
from typing import List, Optional

from .core.config import Settings
from .core.exceptions import NoAudioFormatException
from .schemas import VideoFormat


class FileNameHelper:
    """Helper para nombres de archivos descargados."""

    @staticmethod
    def download_filename(title: str, extension: Optional[str] = None) -> str:
        """
        Construye el nombre de archivo a partir del título del video.

        Solo reemplaza espacios por guiones bajos y agrega la extensión fija.

        Args:
            title: Título del video
            extension: Extensión a agregar (default desde settings)

        Returns:
            Nombre del archivo (ej: "Mi_video.mp4")
        """
        if extension is None:
            extension = Settings.DOWNLOAD_EXTENSION
        return f"{title.replace(' ', '_')}{extension}"

    @staticmethod
    def sanitize_filename_ascii(name: str) -> str:
        """
        Genera una variante ASCII del nombre para uso en headers HTTP.

        - Normaliza NFKD y elimina marcas diacríticas
        - Sustituye caracteres no ASCII por '-'

        Args:
            name: Nombre a sanitizar

        Returns:
            Nombre en ASCII
        """
        if not name:
            return "file"

        out_chars = []
        for ch in unicodedata.normalize("NFKD", name):
            o = ord(ch)
            if o < 128:
                # Evitar caracteres de control y comillas
                if 32 <= o < 127 and ch != '"':
                    out_chars.append(ch)
                continue
            if unicodedata.category(ch).startswith("M"):
                continue
            out_chars.append("-")

        ascii_name = re.sub(r"\s+", " ", "".join(out_chars)).strip()
        return ascii_name or "file"


class FormatSelector:
    """Selección del formato a descargar."""

    @staticmethod
    def with_audio(formats: List[VideoFormat]) -> List[VideoFormat]:
        """Filtra los formatos que llevan canal de audio, manteniendo el orden."""
        return [f for f in formats if f.has_audio]

    @staticmethod
    def best_audio_format(formats: List[VideoFormat]) -> VideoFormat:
        """
        Elige el formato con audio de mayor altura.

        En caso de empate gana el primero visto.

        Args:
            formats: Formatos en el orden devuelto por el backend

        Returns:
            Formato elegido

        Raises:
            NoAudioFormatException: Si ningún formato lleva audio
        """
        candidates = FormatSelector.with_audio(formats)
        if not candidates:
            raise NoAudioFormatException()

        best = candidates[0]
        for fmt in candidates:
            if fmt.height > best.height:
                best = fmt
        return best
