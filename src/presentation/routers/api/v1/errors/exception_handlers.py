"""Global exception handlers for FastAPI application.

Every error leaving the API has the `{error, code}` shape, whether it came
from a handler Result, a guard's HTTPException, request validation, or an
unexpected exception.

Handlers:
    http_exception_handler: Renders HTTPException detail as the body
    validation_exception_handler: RequestValidationError -> 400 VALIDATION_FAILED
    generic_exception_handler: Catches all unhandled exceptions (500)

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.core.container import get_logger
from src.core.enums import ErrorCode

# Fallback codes for HTTPExceptions raised with a plain string detail
_CODE_BY_STATUS: dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION_FAILED,
    401: ErrorCode.INVALID_TOKEN,
    403: ErrorCode.INSUFFICIENT_PERMISSIONS,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
    429: ErrorCode.RATE_LIMITED,
}


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to an `{error, code}` response.

    Also covers routing errors (unknown path 404, wrong method 405).
    Guards and the rate limiter raise HTTPException with a dict detail that
    is already the body; a string detail is wrapped.

    Example:
        >>> raise HTTPException(
        ...     status_code=401,
        ...     detail={"error": "Access token required", "code": "NO_TOKEN"},
        ... )
        >>> # 401 {"error": "Access token required", "code": "NO_TOKEN"}
    """
    # Type narrowing: registered only for (Starlette) HTTPException
    assert isinstance(exc, StarletteHTTPException)

    content: dict[str, Any]
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        code = _CODE_BY_STATUS.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
        content = {"error": str(exc.detail), "code": code.value}

    # Preserve any headers from HTTPException (e.g., Retry-After)
    headers = getattr(exc, "headers", None)

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=headers,
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError (bad JSON, wrong types) to 400.

    Example:
        >>> # POST /auth/login with body `{"email": 42}`
        >>> # 400 {"error": "Request validation failed", "code": "VALIDATION_FAILED",
        >>> #      "details": [{"field": "email", "message": "Input should be a valid string"}]}
    """
    # Type narrowing: FastAPI registers this handler only for RequestValidationError
    assert isinstance(exc, RequestValidationError)

    field_errors: list[dict[str, str]] = []
    for error in exc.errors():
        # Extract field path (e.g., ["body", "email"] -> "email")
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p != "body"]
        field_errors.append(
            {
                "field": ".".join(field_parts) if field_parts else "body",
                "message": error.get("msg", "Validation failed"),
            }
        )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Request validation failed",
            "code": ErrorCode.VALIDATION_FAILED.value,
            "details": field_errors,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Prevents leaking stack traces or internal details to API consumers.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        request_path=request.url.path,
        request_method=request.method,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error",
            "code": ErrorCode.INTERNAL_ERROR.value,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> register_exception_handlers(app)
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
