from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.logger import logger
from src.models.response_models import ErrorResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the `{"error": "..."}` body shared by every failing endpoint."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def pydantic_validation_exception_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Handle request bodies that do not fit the expected model (e.g. a JSON array)."""
    logger.info(
        "Pydantic validation error during request handling "
        f"path={request.url.path} method={request.method} errors={exc.errors(include_input=False)}"
    )
    return error_response(status.HTTP_400_BAD_REQUEST, "invalid request body")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors to return a structured 500 response."""
    logger.exception(
        f"Unhandled exception while processing request: {repr(exc)} path={request.url.path} method={request.method}"
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or type(exc).__name__)
