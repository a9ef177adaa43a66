"""
Manejadores de excepciones de FastAPI.

Convierte las excepciones de la capa de servicio (y los errores de validación
de pydantic) en el cuerpo de error estándar de la API.
"""

import logging
from typing import Any, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.error_codes import ApiErrorCode
from core.exceptions import AppException, ValidationException
from models.common import create_error_response

logger = logging.getLogger(__name__)

# Ubicaciones de pydantic/FastAPI que no son nombres de campo
_LOCATION_PARTS = {"body", "path", "query", "header", "cookie"}

# Tipos de error de pydantic -> código simbólico de la API
_PYDANTIC_CODES = {
    "missing": "required",
    "string_too_short": "required",
    "blank": "required",
    "string_too_long": "too_long",
    "not_in_past": "not_in_past",
    "not_in_future": "not_in_future",
}


def _field_from_loc(loc: tuple) -> Optional[str]:
    """Devuelve el último nombre de campo de un ``loc`` de pydantic."""
    for part in reversed(loc):
        if isinstance(part, str) and part not in _LOCATION_PARTS:
            return part
    return None


def violations_from_pydantic(errors: List[dict[str, Any]]) -> List[dict[str, Any]]:
    """
    Traduce los errores de pydantic a violaciones de campo.
    
    Args:
        errors: Lista devuelta por ``RequestValidationError.errors()``
        
    Returns:
        Lista de violaciones ``{"field", "code", "message"}``
    """
    violations = []
    for error in errors:
        error_type = error.get("type", "")
        violations.append({
            "field": _field_from_loc(tuple(error.get("loc", ()))),
            "code": _PYDANTIC_CODES.get(error_type, "invalid_format"),
            "message": error.get("msg", ""),
        })
    return violations


def _error_json(
    request: Request,
    status_code: int,
    error: ApiErrorCode,
    reason: str,
    violations: Optional[List[dict[str, Any]]] = None,
) -> JSONResponse:
    body = create_error_response(
        error_code=error.error_code,
        reason=reason,
        method=request.method,
        uri=request.url.path,
        errors=violations,
    )
    return JSONResponse(status_code=status_code, content=body)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Errores esperados de negocio: 404, 400, 409..."""
    if exc.status_code >= 500:
        logger.error(f"Error de aplicación en {request.method} {request.url.path}: {exc.message}")
        return _error_json(
            request,
            exc.status_code,
            ApiErrorCode.INTERNAL_SERVER_ERROR,
            ApiErrorCode.INTERNAL_SERVER_ERROR.reason,
        )
    
    violations = exc.violations if isinstance(exc, ValidationException) else None
    return _error_json(request, exc.status_code, exc.error, exc.message, violations)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Errores de forma de la petición detectados por pydantic -> 400."""
    return _error_json(
        request,
        status.HTTP_400_BAD_REQUEST,
        ApiErrorCode.VALIDATION_FAILED,
        ApiErrorCode.VALIDATION_FAILED.reason,
        violations_from_pydantic(exc.errors()),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Cualquier otro error se reporta como 500 con el mensaje genérico."""
    logger.error(f"Unexpected error en {request.method} {request.url.path}: {exc}", exc_info=True)
    return _error_json(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ApiErrorCode.INTERNAL_SERVER_ERROR,
        ApiErrorCode.INTERNAL_SERVER_ERROR.reason,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra todos los manejadores de excepciones en la aplicación."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
