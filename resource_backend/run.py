"""
Uvicorn launcher for the FastAPI app.

Reads host and port from Settings (env/.env) and starts the server. Binds to
0.0.0.0:3000 by default; set PORT to override.
"""

import os

import uvicorn  # type: ignore

from src.core.config import get_settings
from src.core.logger import get_logger

logger = get_logger(__name__)


def _reload_enabled() -> bool:
    return os.getenv("UVICORN_RELOAD", "").lower() in ("1", "true", "yes")


# PUBLIC_INTERFACE
def main() -> None:
    """Start the FastAPI application with uvicorn."""
    settings = get_settings()
    logger.info("Server listening", extra={"host": settings.HOST, "port": settings.PORT})
    uvicorn.run(
        "src.api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=_reload_enabled(),
        log_level=settings.effective_log_level().lower(),
    )


if __name__ == "__main__":
    main()
