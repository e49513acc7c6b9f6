"""Mapping from service errors to HTTP responses."""
import logging

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from finance_ledger.domain.errors import ConflictError, LedgerError, NotFoundError

logger = logging.getLogger(__name__)


def http_error(error: LedgerError) -> HTTPException:
    """Pick the status code for a service error.

    404 not found, 409 constraint conflict, 400 for everything else the
    caller got wrong.
    """
    if isinstance(error, NotFoundError):
        status_code = 404
    elif isinstance(error, ConflictError):
        status_code = 409
    else:
        status_code = 400
    return HTTPException(status_code=status_code, detail=str(error))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and query params are client errors (400), like every other bad input."""
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    detail = "; ".join(messages) or "invalid request"
    logger.warning(f"Rejected request to {request.url.path}: {detail}")
    return JSONResponse(status_code=400, content={"detail": detail})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "internal server error"})
