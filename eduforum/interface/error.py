"""Interface layer errors.

Maps domain exceptions onto HTTP errors. Every error leaves the API as
``{"error": "<message>"}``.
"""

import logfire
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from eduforum.domain.error import (
    AssistantError,
    BusinessRuleViolationError,
    ContentRejectedError,
    DomainError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(
    error: DomainError,
    operation: str,
    server_error: str = "Internal server error",
) -> HTTPException:
    """Translate a domain error raised by a guarded operation.

    Missing sessions and wrong roles both answer 403 on guarded operations.

    Args:
        error: Domain error raised by a use case
        operation: Operation name for logs
        server_error: Message used when the assistant provider failed

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, (ValidationError, BusinessRuleViolationError, ContentRejectedError)):
        logfire.warn(f"{operation} rejected", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, InvalidCredentialsError):
        logfire.warn(f"{operation} rejected", error=str(error))
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )

    if isinstance(error, (NotAuthenticatedError, NotAuthorizedError)):
        logfire.warn(f"{operation} forbidden", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    if isinstance(error, NotFoundError):
        logfire.warn(f"{operation} target not found", error=str(error))
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"{error.resource} not found"
        )

    if isinstance(error, AssistantError):
        logfire.error(f"{operation} assistant failure", error=str(error))
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=server_error
        )

    logfire.error(f"{operation} failed", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=server_error
    )


def invalid_input(operation: str, error: ValueError) -> HTTPException:
    """Answer 400 for values the domain models refuse (length limits)."""
    logfire.warn(f"{operation} invalid input", error=str(error))
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid input")


def unexpected_error(operation: str, error: Exception) -> HTTPException:
    """Log an unexpected failure and hide its details from the caller."""
    logfire.error(f"Unexpected error in {operation}", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTP errors in the API's error envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies with 400."""
    errors = exc.errors()
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"Invalid request: {location} {errors[0].get('msg', '')}".strip()
    else:
        message = "Invalid request"
    logfire.warn("Request validation failed", path=request.url.path, error=message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Install the error envelope on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
