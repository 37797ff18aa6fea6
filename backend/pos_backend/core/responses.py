import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlmodel import SQLModel

from .database import RecordNotFoundError, StoreError, UniqueViolationError

logger = logging.getLogger(__name__)


class RespondMessage(SQLModel):
    respond: str


def error_response(message: str) -> dict:
    return {"error": message}

def text_response(message: str) -> dict:
    return {"respond": message}


def store_http_exception(error: StoreError, unique_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR) -> HTTPException:
    """
    Maps a persistence error onto the HTTP status the handlers report.
    Only user creation treats a uniqueness conflict as 403, so callers opt in.
    """
    if isinstance(error, RecordNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, UniqueViolationError):
        return HTTPException(status_code=unique_status, detail=str(error))
    logger.error("Persistence failure: %s", error)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{'.'.join(str(loc) for loc in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_response(errors))

async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("internal server error"),
    )
