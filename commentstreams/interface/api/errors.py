"""Mapping of domain and interface errors onto HTTP responses.

Every error response has the shape ``{"error": {"code": ..., "info": ...}}``
where ``code`` is the message key and ``info`` its localized text.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from commentstreams.domain.error import (
    DomainError,
    NotACommentError,
    NotFoundError,
    ParentNotFoundError,
    PermissionDeniedError,
    PersistFailureError,
    ValidationError,
)
from commentstreams.interface.api.messages import get_message
from commentstreams.interface.error import (
    InterfaceError,
    InvalidTokenError,
    MissingActorError,
)

STATUS_CODES: dict[type[Exception], int] = {
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    ParentNotFoundError: status.HTTP_404_NOT_FOUND,
    PersistFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    NotACommentError: status.HTTP_404_NOT_FOUND,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    InvalidTokenError: status.HTTP_403_FORBIDDEN,
    MissingActorError: status.HTTP_401_UNAUTHORIZED,
}


def status_code_for(error: Exception) -> int:
    """Return the HTTP status for an error (500 when unmapped)."""
    for error_type in type(error).__mro__:
        if error_type in STATUS_CODES:
            return STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(
    error: DomainError | InterfaceError, accept_language: str | None
) -> JSONResponse:
    """Build the structured error response for an error."""
    return JSONResponse(
        status_code=status_code_for(error),
        content={
            "error": {
                "code": error.message_key,
                "info": get_message(error.message_key, accept_language),
            }
        },
    )


async def handle_error(
    request: Request, exc: DomainError | InterfaceError
) -> JSONResponse:
    """Exception handler shared by all domain and interface errors."""
    response = error_response(exc, request.headers.get("accept-language"))
    if response.status_code >= 500:
        logfire.error(
            "Request failed",
            path=request.url.path,
            code=exc.message_key,
            error=str(exc),
        )
    else:
        logfire.warn(
            "Request rejected",
            path=request.url.path,
            code=exc.message_key,
            error=str(exc),
        )
    return response


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(DomainError, handle_error)
    app.add_exception_handler(InterfaceError, handle_error)
