from collections import defaultdict
from typing import Any, Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lib.logger import Logger
from src.exceptions.domain_exceptions import (
    ConfigurationError,
    DomainError,
    ExtractionApiError,
    ExtractionCancelledError,
    ExtractionFailedError,
    ExtractionTimeoutError,
    InvalidArgumentError,
    NetworkError,
    ProtocolError,
    StatusCheckError,
    SubmissionError,
)

logger = Logger.get_logger(__name__)


def build_http_fastapi_error_response(
    status_code: int = status.HTTP_400_BAD_REQUEST,
    error_code: str = "VALIDATION_ERROR",
    message: str = "Validation failed",
    details: str | dict[str, Any] = "",
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_code": error_code, "message": message, "details": details},
    )


# Looked up along the MRO of the raised error.
ERROR_STATUS_CODES: Dict[Type[DomainError], tuple[int, str]] = {
    ConfigurationError: (status.HTTP_500_INTERNAL_SERVER_ERROR, "CONFIGURATION_ERROR"),
    InvalidArgumentError: (status.HTTP_400_BAD_REQUEST, "INVALID_ARGUMENT"),
    SubmissionError: (status.HTTP_502_BAD_GATEWAY, "SUBMISSION_ERROR"),
    StatusCheckError: (status.HTTP_502_BAD_GATEWAY, "STATUS_CHECK_ERROR"),
    ProtocolError: (status.HTTP_502_BAD_GATEWAY, "PROTOCOL_ERROR"),
    ExtractionApiError: (status.HTTP_502_BAD_GATEWAY, "EXTRACTION_API_ERROR"),
    ExtractionFailedError: (status.HTTP_422_UNPROCESSABLE_ENTITY, "EXTRACTION_FAILED"),
    ExtractionCancelledError: (status.HTTP_409_CONFLICT, "EXTRACTION_CANCELLED"),
    ExtractionTimeoutError: (status.HTTP_504_GATEWAY_TIMEOUT, "EXTRACTION_TIMEOUT"),
    NetworkError: (status.HTTP_503_SERVICE_UNAVAILABLE, "NETWORK_ERROR"),
}


def resolve_error_status(error: DomainError) -> tuple[int, str]:
    """Map a domain error to an HTTP status code and error code."""
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "GENERIC_ERROR"


def _error_details(error: DomainError) -> dict[str, Any]:
    details: dict[str, Any] = dict(error.context or {})
    for field_name in ("status_code", "vendor_message", "job_id", "attempts", "field_name", "config_key"):
        value = getattr(error, field_name, None)
        if value is not None:
            details[field_name] = value
    return details


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, DomainError):
        raise exc
    status_code, error_code = resolve_error_status(exc)
    log_message = f"{error_code}: {exc.message}"
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(log_message, request_path=request.url.path)
    else:
        logger.warning(log_message, request_path=request.url.path)
    return build_http_fastapi_error_response(
        status_code=status_code, error_code=error_code, message=exc.message, details=_error_details(exc)
    )


def get_errors(errors: list[Any] = []) -> dict[str, list[str]]:
    """Format validation errors into a more readable structure"""
    reformatted_message: dict[str, list[str]] = defaultdict(list)
    for pydantic_error in errors:
        loc, msg = pydantic_error["loc"], pydantic_error["msg"]
        filtered_loc = loc[1:] if loc[0] in ("body", "query", "path") else loc
        filtered_loc = [f if isinstance(f, str) else "body" if isinstance(f, int) else str(f) for f in filtered_loc]
        field_string = ".".join(filtered_loc)
        if field_string == "":
            field_string = "body"
        reformatted_message[field_string].append(msg)
    return reformatted_message


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, RequestValidationError):
        raise exc
    return build_http_fastapi_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        error_code="VALIDATION_ERROR",
        message="Validation failed",
        details=get_errors(list(exc.errors())),
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Attach domain and validation error handlers to the application."""
    application.add_exception_handler(DomainError, domain_error_handler)
    application.add_exception_handler(RequestValidationError, request_validation_error_handler)
