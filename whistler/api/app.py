"""FastAPI application for whistler."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from whistler.__version__ import __version__
from whistler.api.routes import router
from whistler.config import Config
from whistler.exceptions import WhistlerError
from whistler.logging_config import get_logger

logger = get_logger(__name__)


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Build the API application.

    Args:
        config: Configuration; read from WHISTLER_* environment variables when omitted
    """
    app = FastAPI(title="whistler", version=__version__)
    app.state.config = config if config is not None else Config.from_env()

    # The UI is served from a different origin during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(WhistlerError)
    async def whistler_error_handler(request: Request, exc: WhistlerError) -> JSONResponse:
        if not exc.is_client_error:
            logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.get("/health")
    async def health_check() -> dict:
        """Lightweight endpoint for uptime checks."""
        return {"status": "healthy"}

    app.include_router(router)
    return app
