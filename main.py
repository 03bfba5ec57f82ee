import argparse
import os

from dotenv import load_dotenv
import uvicorn

from tubefetch.core.config import Settings
from tubefetch.core.enums import Variant


def main():
    # Cargar variables de entorno desde .env antes de leer la configuración
    load_dotenv()

    parser = argparse.ArgumentParser(description="TubeFetch API")
    parser.add_argument(
        "variant",
        nargs="?",
        choices=[v.value for v in Variant],
        help="Variante del servicio (default: TUBEFETCH_VARIANT o 'library')",
    )
    args = parser.parse_args()

    # Los workers de uvicorn heredan el entorno y construyen la app con la factory
    if args.variant:
        os.environ["TUBEFETCH_VARIANT"] = args.variant

    settings = Settings()
    uvicorn.run(
        "tubefetch.api:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD,
        workers=settings.WORKERS if not settings.RELOAD else 1
    )


if __name__ == "__main__":
    main()
