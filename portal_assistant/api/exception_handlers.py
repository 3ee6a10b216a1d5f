"""
Exception handlers for FastAPI application.

Errors raised before the chat processor runs (oversized messages, malformed
bodies, unknown routes, crashes) are rendered as an unsuccessful ChatResponse,
so the portal widget always receives the same body shape.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal_assistant.agents.chat_processor import ERROR_REPLY
from portal_assistant.application.dto import ChatResponse

logger = logging.getLogger(__name__)

TOO_LONG_REPLY = "Your message is too long. Please shorten it and try again."
INVALID_REQUEST_REPLY = "I couldn't read that request. Please send your message again."

# User-facing reply per boundary status; anything else gets the generic apology
STATUS_REPLIES = {
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: TOO_LONG_REPLY,
    status.HTTP_422_UNPROCESSABLE_ENTITY: INVALID_REQUEST_REPLY,
}


def chat_error_response(status_code: int, error_message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    """
    Build an unsuccessful ChatResponse body with the given HTTP status.

    Args:
        status_code: HTTP status of the response
        error_message: Technical reason, sent as errorMessage
        headers: Optional response headers

    Returns:
        JSONResponse with camelCase ChatResponse content
    """
    body = ChatResponse.failure(STATUS_REPLIES.get(status_code, ERROR_REPLY), error_message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render HTTPException (413, 404, ...) as a ChatResponse."""
    if not isinstance(exc, StarletteHTTPException):
        return await global_exception_handler(request, exc)

    logger.info(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return chat_error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render request validation errors as a ChatResponse listing the bad fields."""
    if not isinstance(exc, RequestValidationError):
        return chat_error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    errors = "; ".join(f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {errors}")

    return chat_error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, errors)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns the generic apology.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=True,
    )

    return chat_error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
