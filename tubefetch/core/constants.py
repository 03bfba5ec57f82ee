"""
Constantes utilizadas en la aplicación.
Centraliza valores constantes para facilitar el mantenimiento.
"""

# Hosts reconocidos al extraer el ID de video
YOUTUBE_SHORT_HOSTS = ("youtu.be",)
YOUTUBE_WATCH_HOSTS = ("youtube.com", "www.youtube.com", "m.youtube.com")
YOUTUBE_WATCH_PATH = "/watch"
YOUTUBE_VIDEO_ID_PARAM = "v"

# Hosts de Google que pueden recibir el token OAuth2 (incluye subdominios)
GOOGLE_TOKEN_HOSTS = ("youtube.com", "googlevideo.com", "googleapis.com")

# yt-dlp
YTDLP_BASE_OPTIONS = {
    "quiet": True,
    "no_warnings": True,
    "noplaylist": True,
    "extract_flat": False,
}

# YouTube Data API
YOUTUBE_API_SERVICE_NAME = "youtube"
YOUTUBE_API_VERSION = "v3"
YOUTUBE_API_PARTS = "snippet"

# Rutas
DOWNLOADS_URL_PREFIX = "/downloads"

# Mensajes de error
ERROR_INVALID_JSON = "Cuerpo JSON inválido"
ERROR_EMPTY_URL = "Proporcione una URL de video"

# Mensajes de éxito
SUCCESS_DOWNLOADED = "Video descargado correctamente"
