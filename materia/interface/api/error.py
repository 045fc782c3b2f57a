"""Error handling middleware.

Turns every exception escaping a request into a JSON body of the form
``{"detail": ...}``. Only the codes listed in ``EXPOSED_ERROR_CODES`` reach
the caller; everything else collapses to ``GENERIC_ERROR_MESSAGE`` and is
logged with full detail.
"""

from collections.abc import Awaitable, Callable

import logfire
from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from materia.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    MissingPermissionError,
    NoActiveSessionError,
    NotFoundError,
    ValidationError,
)

GENERIC_ERROR_MESSAGE = "Something went wrong while executing the operation."

# Codes the client may rely on to show a specific message
EXPOSED_ERROR_CODES: frozenset[str] = frozenset(
    {
        "characteristicHasMaterials",
        "characteristicNotFound",
        "tagHasMaterials",
        "tagNotFound",
        "roleHasUsers",
        "missingPermission",
        "materialNotFound",
        "unknownCharacteristicType",
        "characteristicValueMismatch",
        "userNotFound",
        "entityNotFound",
        "fileNotFound",
        "emailInUse",
        "userProtected",
        "entityNotAssigned",
        "userLimitReached",
        "userWithoutEntity",
    }
)

# Checked in order, first match wins
EXCEPTION_STATUS_MAP: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (BusinessRuleViolationError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (NoActiveSessionError, status.HTTP_401_UNAUTHORIZED),
    (MissingPermissionError, status.HTTP_403_FORBIDDEN),
]


def status_for(exc: Exception) -> int:
    """HTTP status code of an exception."""
    if isinstance(exc, PydanticValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    for exc_type, code in EXCEPTION_STATUS_MAP:
        if isinstance(exc, exc_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def public_detail(exc: Exception) -> object:
    """Part of an exception that may be shown to the caller.

    Args:
        exc: Exception raised while handling a request

    Returns:
        Per-field errors for invalid input, the error code when it is
        allow-listed, otherwise the generic message
    """
    if isinstance(exc, PydanticValidationError):
        return exc.errors(include_url=False, include_context=False, include_input=False)
    if isinstance(exc, DomainError) and exc.code in EXPOSED_ERROR_CODES:
        return exc.code
    return GENERIC_ERROR_MESSAGE


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Global error handling middleware.

    Must wrap the dependency injection middleware so the request's unit of
    work has been rolled back before the response is built.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Handle request with error catching."""
        try:
            return await call_next(request)
        except Exception as e:
            return self._handle_exception(request, e)

    def _handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        status_code = status_for(exc)

        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logfire.exception(
                "Unhandled error",
                method=request.method,
                path=request.url.path,
                error_type=type(exc).__name__,
            )
        else:
            logfire.info(
                "Request rejected",
                path=request.url.path,
                status_code=status_code,
                error_code=getattr(exc, "code", type(exc).__name__),
            )

        return JSONResponse(
            status_code=status_code,
            content={"detail": public_detail(exc)},
        )
