"""
Excepciones personalizadas de la aplicación.
Cada excepción lleva el código HTTP con el que se reporta al cliente.
"""


class TubeFetchException(Exception):
    """Excepción base para todas las excepciones de TubeFetch."""

    status_code: int = 500

    def __init__(self, message: str, details: str = None):
        """
        Args:
            message: Mensaje principal del error
            details: Detalles adicionales opcionales
        """
        self.message = message
        self.details = details
        full_message = f"{message}"
        if details:
            full_message += f" - {details}"
        super().__init__(full_message)


# === 400 ===

class InvalidURLException(TubeFetchException):
    """Se lanza cuando una URL está vacía o no se puede interpretar."""

    status_code = 400

    def __init__(self, url: str = None, reason: str = None):
        message = "URL inválida o no soportada"
        details = []
        if url:
            details.append(f"URL: {url}")
        if reason:
            details.append(reason)
        super().__init__(message, " | ".join(details) if details else None)


class MissingAuthCodeException(TubeFetchException):
    """Se lanza cuando el callback OAuth2 llega sin código."""

    status_code = 400

    def __init__(self):
        super().__init__("Falta el código de autorización")


# === 403 / 404 ===

class UnauthorizedPathException(TubeFetchException):
    """Se lanza cuando una ruta sale del directorio permitido."""

    status_code = 403

    def __init__(self, path: str = None):
        super().__init__("Acceso a ruta no permitido", f"Ruta: {path}" if path else None)


class VideoNotFoundException(TubeFetchException):
    """Se lanza cuando la plataforma no devuelve el video solicitado."""

    status_code = 404

    def __init__(self, video_id: str = None):
        super().__init__("Video no encontrado", f"ID: {video_id}" if video_id else None)


class FileNotFoundException(TubeFetchException):
    """Se lanza cuando no se encuentra un archivo descargado."""

    status_code = 404

    def __init__(self, filename: str = None):
        super().__init__("Archivo no encontrado", f"Archivo: {filename}" if filename else None)


# === 500 ===

class TokenNotFoundException(TubeFetchException):
    """Se lanza cuando no existe el archivo de token."""

    def __init__(self, path: str = None):
        super().__init__("Archivo de token no encontrado", f"Ruta: {path}" if path else None)


class TokenStoreException(TubeFetchException):
    """Se lanza cuando el token no se puede leer, decodificar o escribir."""


class TokenExchangeException(TubeFetchException):
    """Se lanza cuando falla el intercambio del código por un token."""

    def __init__(self, reason: str = None):
        super().__init__("Error al intercambiar el código por un token", reason)


class ClientBuildException(TubeFetchException):
    """Se lanza cuando no se puede construir el cliente autenticado."""

    def __init__(self, reason: str = None):
        super().__init__("Error al obtener el cliente OAuth2", reason)


class MetadataFetchException(TubeFetchException):
    """Se lanza cuando falla la obtención de metadatos del video."""

    def __init__(self, url: str = None, reason: str = None):
        message = "Error al obtener la información del video"
        details = []
        if url:
            details.append(f"URL: {url}")
        if reason:
            details.append(reason)
        super().__init__(message, " | ".join(details) if details else None)


class NoAudioFormatException(TubeFetchException):
    """Se lanza cuando ningún formato disponible lleva audio."""

    def __init__(self):
        super().__init__("No se encontraron formatos con audio")


class DownloadFailedException(TubeFetchException):
    """Se lanza cuando falla la creación del archivo o la copia del stream."""

    def __init__(self, path: str = None, reason: str = None):
        message = "Descarga fallida"
        details = []
        if path:
            details.append(f"Archivo: {path}")
        if reason:
            details.append(f"Razón: {reason}")
        super().__init__(message, " | ".join(details) if details else None)


class DownloadNotImplementedException(TubeFetchException):
    """Se lanza siempre desde la descarga de la variante platform."""

    def __init__(self):
        super().__init__("La descarga del video no está implementada")
