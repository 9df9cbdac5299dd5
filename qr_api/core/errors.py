# qr_api/core/errors.py
from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from qr_api.services.uploads import UploadError

__all__ = ["register_exception_handlers", "is_upload_error_message"]

# Messages mentioning either phrase are client-side upload problems.
UPLOAD_ERROR_MARKERS = ("image files", "file size")

HTTP_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    413: "PAYLOAD_TOO_LARGE",
    502: "BAD_GATEWAY",
    503: "SERVICE_UNAVAILABLE",
}


def _build_problem_response(
    *,
    status_code: int,
    code: str,
    message: str,
    detail: Any | None = None,
) -> JSONResponse:
    """Common error body for every failure the API returns."""
    payload: dict[str, Any] = {
        "code": code,
        "message": message,
    }
    if detail is not None:
        payload["detail"] = detail

    return JSONResponse(status_code=status_code, content=payload)


def _convert_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    return [
        {
            "loc": list(e.get("loc", ())),
            "msg": e.get("msg"),
            "type": e.get("type"),
        }
        for e in exc.errors()
    ]


def is_upload_error_message(message: str) -> bool:
    return any(marker in message for marker in UPLOAD_ERROR_MARKERS)


def _upload_problem(message: str) -> JSONResponse:
    return _build_problem_response(
        status_code=400,
        code="INVALID_UPLOAD",
        message=message or "Invalid upload",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the global exception handlers.

    - RequestValidationError: malformed body / path id (400)
    - HTTPException: 404, 502, 503 raised by endpoints
    - UploadError and upload-looking messages: 400
    - Exception: everything else (500, logged, no detail leaked)
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        errors = _convert_validation_errors(exc)

        logger.info(
            "Request validation failed: {} {} ({} errors)",
            request.method,
            request.url.path,
            len(errors),
        )

        return _build_problem_response(
            status_code=400,
            code="INVALID_INPUT",
            message="; ".join(
                f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in errors
            )
            or "Invalid input",
            detail=errors,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        logger.warning(
            "HTTPException: {} {} -> {} ({})",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )

        return _build_problem_response(
            status_code=exc.status_code,
            code=HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            message=str(exc.detail) if exc.detail else "HTTP error",
        )

    @app.exception_handler(UploadError)
    async def upload_exception_handler(
        request: Request,
        exc: UploadError,
    ) -> JSONResponse:
        logger.info("Upload rejected: {} {}: {}", request.method, request.url.path, exc)
        return _upload_problem(str(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        message = str(exc)
        if is_upload_error_message(message):
            return _upload_problem(message)

        logger.opt(exception=exc).error(
            "Unhandled exception: {} {}",
            request.method,
            request.url.path,
        )

        return _build_problem_response(
            status_code=500,
            code="INTERNAL_SERVER_ERROR",
            message="Internal server error",
        )
