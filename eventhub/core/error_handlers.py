"""HTTP error handlers for FastAPI application.

This module provides the bridge between application exceptions and HTTP responses.
It maps domain-level exceptions to appropriate HTTP status codes and response formats.

Every error body has the shape ``{"error": "<message>"}``.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from eventhub.exceptions import AppException, ValidationError


async def validation_error_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    """
    Convert a ValidationError into an HTTP 400 Bad Request JSON response.

    Parameters:
        request (Request): The incoming HTTP request.
        exc (ValidationError): The rejected-input error.

    Returns:
        JSONResponse: Response with status 400 and a JSON body `{"error": "<exception message>"}`.
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle unhandled application-level exceptions and produce a standardized 500 Internal Server Error response.

    Parameters:
        request (Request): The incoming HTTP request.
        exc (AppException): The unhandled application-level exception.

    Returns:
        JSONResponse: HTTP 500 response with content {"error": "An internal error occurred"}.
    """
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An internal error occurred"},
    )


def register_exception_handlers(app) -> None:
    """
    Register the application's domain-to-HTTP exception handlers on a FastAPI app.

    Registers handlers from most specific to most general so that subclassed
    exceptions are matched before their parent types:
    ValidationError -> 400 and AppException -> 500.

    Parameters:
        app: The FastAPI application instance to which the exception handlers will be attached.
    """
    app.add_exception_handler(ValidationError, validation_error_handler)

    # Catch-all for unhandled application exceptions
    app.add_exception_handler(AppException, app_exception_handler)
