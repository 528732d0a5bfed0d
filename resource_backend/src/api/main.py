from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.config import Settings, get_settings
from ..core.logger import get_logger
from ..db.json_store import JsonStore
from ..routers.health import router as health_router
from ..routers.resources import router as resources_router
from ..services.resource_service import ResourceService

logger = get_logger(__name__)


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into one line, e.g. 'body.type: Field required'."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg", "invalid")))
    return "; ".join(parts) or "Invalid request"


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> ORJSONResponse:
    message = _format_validation_errors(exc)
    logger.debug("Request validation failed", extra={"path": request.url.path, "detail": message})
    return ORJSONResponse(status_code=400, content={"message": message})


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None, service: Optional[ResourceService] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Configuration to use; defaults to the cached environment settings.
        service: Pre-built resource service (tests inject one with fixed ids/clock).
            When omitted, one is created over settings.RESOURCES_FILE.

    Returns:
        The configured FastAPI instance.
    """
    settings = settings or get_settings()
    if service is None:
        service = ResourceService(JsonStore(settings.RESOURCES_FILE))

    app = FastAPI(
        title=settings.APP_NAME,
        description="CRUD REST API for resource records persisted in a JSON file.",
        version="1.0.0",
        default_response_class=ORJSONResponse,
        openapi_tags=[
            {"name": "Health", "description": "Service health and diagnostics"},
            {"name": "Resources", "description": "Resource records management"},
        ],
    )
    app.state.settings = settings
    app.state.resource_service = service

    origins = settings.cors_origins_list()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    app.include_router(health_router)
    app.include_router(resources_router, prefix=settings.API_PREFIX)

    logger.info(
        "FastAPI app initialized",
        extra={"app_name": settings.APP_NAME, "env": settings.APP_ENV, "store": settings.RESOURCES_FILE},
    )
    return app


app = create_app()


if __name__ == "__main__":
    # Allow running as: python -m src.api.main
    import uvicorn  # type: ignore

    _settings = get_settings()
    uvicorn.run("src.api.main:app", host=_settings.HOST, port=_settings.PORT, log_level="info")
