"""
Exception handlers shared by every router.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def _describe_error(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return "Malformed JSON body"

    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    field = ".".join(location) or "request body"

    if error.get("type") == "missing":
        return f"Missing `{field}` in request body"
    return f"Invalid `{field}`: {error.get('msg')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Answer request validation failures with 400 and a readable message."""
    errors = exc.errors()
    message = _describe_error(errors[0]) if errors else "Invalid request"
    logger.warning(f"{request.method} {request.url.path} rejected: {message}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": message, "errors": errors})
    )


def setup_error_handlers(app: FastAPI):
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
