from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cipher_tools import __version__
from cipher_tools.api.v1.router import api_router
from cipher_tools.core.config import get_settings
from cipher_tools.core.logging import configure_logging

settings = get_settings()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical Cipher Tools API. "
            "Encrypt and decrypt with a keyed columnar transposition cipher "
            "(PKCS#7 padded) or a keyed substitution cipher. "
            "Not suitable for protecting real secrets."
        ),
        version=__version__,
        debug=settings.debug,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "cipher_tools.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
