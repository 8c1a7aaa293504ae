"""Error bodies and id parsing shared by the API routers."""
import logging
import re

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_id(raw: str, kind: str) -> int:
    """
    Parse a path or query id.

    Raises:
        HTTPException: 400 'Invalid <kind> ID' when raw is not a base-10 integer
    """
    if raw is None or not _ID_PATTERN.fullmatch(raw.strip()):
        raise HTTPException(status_code=400, detail=f"Invalid {kind} ID")
    return int(raw)


def not_found(kind: str) -> HTTPException:
    return HTTPException(status_code=404, detail=f"{kind.capitalize()} not found")


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    message = error.get("msg", "Invalid value")
    return f"{message} at \"{location}\"" if location else message


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 with {message, errors}"""
    errors = [
        {
            "path": [part for part in error.get("loc", ()) if part != "body"],
            "message": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    message = "Validation error: " + "; ".join(_describe(error) for error in exc.errors())
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")
    return JSONResponse(status_code=400, content={"message": message, "errors": errors})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Plain {message} body for HTTP errors"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
