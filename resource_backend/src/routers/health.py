from fastapi import APIRouter, HTTPException, Request

from ..core.config import get_settings
from ..core.logger import get_logger
from ..db.json_store import StoreParseError
from ..models.schemas import HealthResponse, MessageResponse

router = APIRouter(prefix="/health", tags=["Health"])

_logger = get_logger(__name__)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=HealthResponse,
    summary="Service health",
    description="Liveness endpoint. Always returns 200 when the app is up; the store is not touched.",
    responses={
        200: {"description": "Service is healthy"},
    },
)
def get_health() -> HealthResponse:
    """Root health indicator used for liveness. Always returns 200 with {'status':'ok'}."""
    settings = get_settings()
    _logger.debug("Health check", extra={"env": settings.APP_ENV})
    return HealthResponse(status="ok")


# PUBLIC_INTERFACE
@router.get(
    "/healthz",
    response_model=HealthResponse,
    summary="Service health (alias)",
    description="Alias health endpoint commonly used by platforms for liveness checks.",
    responses={200: {"description": "Service is healthy"}},
)
def get_healthz() -> HealthResponse:
    """Alias of /health that returns the same response payload."""
    return get_health()


# PUBLIC_INTERFACE
@router.get(
    "/store",
    response_model=HealthResponse,
    summary="Store readability",
    description="Reads the resource document to confirm it exists and parses as a JSON array.",
    responses={
        200: {"description": "Store readable"},
        503: {"model": MessageResponse, "description": "Store unavailable"},
    },
)
def health_store(request: Request) -> HealthResponse:
    """
    Store health check.

    Behavior:
    - Loads the full document through the running app's store (creating it if absent).
    - Returns 200 with {"status":"ok"} on success.
    - Returns 503 when the file is unreadable or corrupt.
    """
    store = request.app.state.resource_service.store
    try:
        count = len(store.read_all())
    except (OSError, StoreParseError) as exc:
        _logger.error("Resource store unavailable", exc_info=exc, extra={"path": str(store.path)})
        raise HTTPException(status_code=503, detail="store_unavailable")
    _logger.info("Resource store OK", extra={"path": str(store.path), "count": count})
    return HealthResponse(status="ok")
