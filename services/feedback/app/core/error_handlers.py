"""Centralized exception handlers for the bus feedback service."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Rota não encontrada."
INTERNAL_ERROR_MESSAGE = "Ocorreu um erro interno no servidor."
INVALID_ID_MESSAGE = "O ID fornecido na URL é inválido. Deve ser um número inteiro positivo."
INVALID_BODY_MESSAGE = "O corpo da requisição deve ser um objeto JSON válido."

BODY_SHAPE_ERRORS = {"json_invalid", "model_type", "model_attributes_type", "dict_type"}


def _flatten_detail(detail: Any) -> str:
    """Convert arbitrary exception detail payloads into a string message."""
    if isinstance(detail, str):
        return detail
    if isinstance(detail, dict):
        for key in ("message", "detail"):
            nested = detail.get(key)
            if isinstance(nested, str):
                return nested
        return "; ".join(f"{key}: {value}" for key, value in detail.items())
    if isinstance(detail, Iterable) and not isinstance(detail, (bytes, bytearray)):
        return "; ".join(_flatten_detail(item) for item in detail)
    if detail is None:
        return INTERNAL_ERROR_MESSAGE
    return str(detail)


def describe_validation_error(error: Dict[str, Any]) -> str:
    """Turn one pydantic/FastAPI error entry into a client-facing message."""

    location = list(error.get("loc", ()))
    error_type = error.get("type", "")
    message = error.get("msg", "Invalid input")

    if location and location[0] == "path":
        return INVALID_ID_MESSAGE

    if error_type in BODY_SHAPE_ERRORS:
        return INVALID_BODY_MESSAGE

    fields = [str(loc) for loc in location[1:]] if location and location[0] == "body" else []
    if not fields:
        return INVALID_BODY_MESSAGE if error_type == "missing" else message

    field = ".".join(fields)
    if error_type == "missing":
        return f'O campo "{field}" é obrigatório.'
    if error_type == "extra_forbidden":
        return f'O campo "{field}" não é permitido ou não pode ser alterado.'
    return f'O campo "{field}" é inválido: {message}.'


def register_exception_handlers(app: FastAPI) -> None:
    """Register handlers that answer every error with a ``{"message": ...}`` body."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):  # type: ignore[override]
        if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
            message = ROUTE_NOT_FOUND_MESSAGE
        else:
            message = _flatten_detail(exc.detail)
        response = JSONResponse(status_code=exc.status_code, content={"message": message})

        if exc.headers:
            for key, value in exc.headers.items():
                response.headers[key] = value

        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:  # type: ignore[override]
        errors = exc.errors()
        # Only the first problem is reported, in declaration order.
        message = describe_validation_error(errors[0]) if errors else INVALID_BODY_MESSAGE
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"message": message}
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:  # type: ignore[override]
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": INTERNAL_ERROR_MESSAGE},
        )


__all__ = ["describe_validation_error", "register_exception_handlers"]
