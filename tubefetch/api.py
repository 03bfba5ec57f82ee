"""
Aplicación FastAPI principal.
create_app() construye una de las tres variantes; cada una corre como proceso propio.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.config import Settings
from .core.constants import ERROR_INVALID_JSON
from .core.enums import Variant
from .core.logging_config import setup_logging
from .routes.auth import router as auth_router
from .routes.download import router as download_router
from .routes.files import router as files_router
from .routes.health import router as health_router
from .storage.media import MediaStore

# Configurar logger
logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """JSON mal formado o campos faltantes se reportan como 400."""
    return JSONResponse(
        status_code=400,
        content={"detail": ERROR_INVALID_JSON, "errors": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": str(err.get("msg", ""))}
        for err in exc.errors()
    ]


def create_app(
    variant: Optional[Union[Variant, str]] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Construye la aplicación de una variante.

    Args:
        variant: library, platform o direct (default desde settings.VARIANT)
        settings: Configuración a inyectar (default: leída del entorno)

    Returns:
        Aplicación FastAPI lista para uvicorn
    """
    settings = settings or Settings()
    variant = Variant(variant or settings.VARIANT)
    setup_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Gestión del ciclo de vida de la aplicación.
        Startup: crea el directorio de descargas (fatal si falla)
        """
        logger.info(f"Starting {variant.value} service...")

        try:
            MediaStore(settings.DOWNLOAD_DIR, settings.DOWNLOAD_DIR_MODE).ensure_directory()
        except OSError as e:
            logger.critical(f"Error creating downloads directory: {e}")
            raise

        yield

        logger.info("Shutting down application...")

    app = FastAPI(
        title=f"{settings.APP_TITLE} ({variant.value})",
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.variant = variant

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Incluir routers principales
    app.include_router(health_router)
    app.include_router(download_router)

    if variant.requires_auth:
        app.include_router(auth_router)

    # Solo la variante library responde con una ruta relativa que hay que servir
    if variant == Variant.LIBRARY:
        app.include_router(files_router)

    return app
