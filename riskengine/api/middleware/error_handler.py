"""Global exception handling."""

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from riskengine.domains.fraud.catalog import CatalogError

logger = structlog.get_logger()

# Checked in order; the first matching exception type wins.
_CLIENT_ERRORS: list[tuple[type[Exception], int, str]] = [
    (CatalogError, 400, "invalid_catalog"),
    (ValueError, 400, "bad_request"),
    (PermissionError, 403, "forbidden"),
    (LookupError, 404, "not_found"),
]


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")

    for exc_type, status_code, error in _CLIENT_ERRORS:
        if isinstance(exc, exc_type):
            logger.warning(error, request_id=request_id, path=request.url.path, error=str(exc))
            return JSONResponse(
                status_code=status_code,
                content={"error": error, "message": str(exc), "request_id": request_id},
            )

    logger.exception("unhandled_exception", request_id=request_id, error=str(exc))
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
            "request_id": request_id,
        },
    )
