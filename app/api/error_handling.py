"""Map rejected data manager operations to HTTP error responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.services.store.errors import (
    DataManagerError,
    InvalidGroupNameError,
    InvalidQuantityError,
    NotFoundError,
    ProtectedGroupError,
)

logger = logging.getLogger(__name__)


def _exception_handler(status_code: int, code: str):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.info(
            f"[API] {request.method} {request.url.path} rejected - {code}: {str(exc)}"
        )
        return JSONResponse(
            status_code=status_code,
            content={"detail": str(exc), "code": code},
        )

    return handler


def register_exception_handlers(app: FastAPI) -> None:
    mappings: list[tuple[type[Exception], int, str]] = [
        (NotFoundError, 404, "NOT_FOUND"),
        (ProtectedGroupError, 403, "PROTECTED_GROUP"),
        (InvalidGroupNameError, 400, "INVALID_GROUP_NAME"),
        (InvalidQuantityError, 400, "INVALID_QUANTITY"),
        (DataManagerError, 400, "BAD_REQUEST"),
    ]

    for exc_cls, status_code, code in mappings:
        app.add_exception_handler(exc_cls, _exception_handler(status_code, code))
