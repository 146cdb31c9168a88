"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses:
- request validation failures -> 400 with per-field messages
- missing records -> 404
- database and unexpected failures -> 500 with the error text attached

Every failure is logged with the operation and affected id before
the response is sent. Request bodies are never logged.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from beneficiaries_api.domain.registry.errors import (
    BeneficiaryNotFoundError,
    DataAccessError,
    DocumentTypeNotFoundError,
    RegistryDomainError,
    UnexpectedResultError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

OPERATION_MESSAGES = {
    "list_beneficiaries": "Failed to retrieve beneficiaries",
    "list_active_beneficiaries": "Failed to retrieve active beneficiaries",
    "list_inactive_beneficiaries": "Failed to retrieve inactive beneficiaries",
    "get_beneficiary": "Failed to retrieve beneficiary",
    "create_beneficiary": "Failed to create beneficiary",
    "update_beneficiary": "Failed to update beneficiary",
    "delete_beneficiary": "Failed to delete beneficiary",
    "restore_beneficiary": "Failed to restore beneficiary",
    "list_document_types": "Failed to retrieve document types",
    "get_document_type": "Failed to retrieve document type",
}

# Field-specific wording that reads better than the generic templates.
FIELD_MESSAGES = {
    ("sex", "string_pattern_mismatch"): "sex must be M or F",
}

_LOCATION_SOURCES = ("body", "query", "path", "header", "cookie")


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _operation_message(operation: str) -> str:
    return OPERATION_MESSAGES.get(operation, "Internal server error")


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(part) for part in loc if part not in _LOCATION_SOURCES]
    return ".".join(parts) or "body"


def _field_message(field: str, error: dict[str, Any]) -> str:
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}
    if (field, kind) in FIELD_MESSAGES:
        return FIELD_MESSAGES[(field, kind)]
    if kind in ("missing", "string_too_short"):
        return f"{field} is required"
    if kind == "string_too_long":
        return f"{field} must not exceed {ctx.get('max_length')} characters"
    if kind == "string_pattern_mismatch":
        return f"{field} must match {ctx.get('pattern')}"
    return error.get("msg", "Invalid value")


def validation_errors(exc: RequestValidationError) -> dict[str, list[str]]:
    """Group validation failures by field name.

    Args:
        exc: The validation error raised by FastAPI.

    Returns:
        Mapping of field name (as sent by the client) to its messages.
    """
    errors: dict[str, list[str]] = {}
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        errors.setdefault(field, []).append(_field_message(field, error))
    return errors


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Reject malformed input before any database call."""
        errors = validation_errors(exc)
        logger.warning(
            "Validation failed: %s %s fields=%s",
            request.method,
            request.url.path,
            sorted(errors),
        )
        return JSONResponse(
            status_code=HTTP_400,
            content={"error": "Validation failed", "errors": errors},
        )

    @app.exception_handler(BeneficiaryNotFoundError)
    async def handle_beneficiary_not_found(
        _request: Request, exc: BeneficiaryNotFoundError
    ) -> JSONResponse:
        """Handle missing beneficiary errors."""
        logger.warning("Beneficiary not found: id=%s", exc.beneficiary_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(DocumentTypeNotFoundError)
    async def handle_document_type_not_found(
        _request: Request, exc: DocumentTypeNotFoundError
    ) -> JSONResponse:
        """Handle missing document type errors."""
        logger.warning("Document type not found: id=%s", exc.document_type_id)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(UnexpectedResultError)
    async def handle_unexpected_result(
        _request: Request, exc: UnexpectedResultError
    ) -> JSONResponse:
        """Handle procedures that returned no row where one was required."""
        logger.error(
            "Unexpected empty result: operation=%s id=%s", exc.operation, exc.entity_id
        )
        return _error_response(HTTP_500, _operation_message(exc.operation), exc.message)

    @app.exception_handler(DataAccessError)
    async def handle_data_access(
        _request: Request, exc: DataAccessError
    ) -> JSONResponse:
        """Handle database failures, attaching the database's message."""
        logger.error(
            "Database error: operation=%s id=%s reason=%s",
            exc.operation,
            exc.entity_id,
            exc.reason,
        )
        return _error_response(HTTP_500, _operation_message(exc.operation), exc.reason)

    @app.exception_handler(RegistryDomainError)
    async def handle_registry_domain(
        _request: Request, exc: RegistryDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled registry domain errors."""
        logger.error("Unhandled registry domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error", exc.message)


def unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled error and build the generic 500 carrying its text.

    Used by UnhandledErrorMiddleware.
    """
    logger.exception(
        "Unexpected error on %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
    )
    return _error_response(HTTP_500, "Internal server error", str(exc) or type(exc).__name__)
