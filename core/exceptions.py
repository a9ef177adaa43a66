"""
Excepciones personalizadas para la aplicación.

Estas excepciones proporcionan una forma estructurada de manejar errores de lógica de negocio
y mapearlos a códigos de estado HTTP apropiados en la capa de API.
"""

from typing import Optional, Any, List

from core.error_codes import ApiErrorCode


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error: ApiErrorCode = ApiErrorCode.INTERNAL_SERVER_ERROR,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error = error
        self.details = details or {}
        super().__init__(self.message)


class NotFoundException(AppException):
    """Excepción cuando un recurso (o uno de sus padres) no se encuentra."""

    def __init__(
        self,
        error: ApiErrorCode,
        identifier: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        details = details or {}
        if identifier is not None:
            details["id"] = identifier
        super().__init__(message=error.reason, status_code=404, error=error, details=details)


class ValidationException(AppException):
    """
    Excepción para errores de validación.

    Agrupa todas las violaciones encontradas en un mismo cuerpo de petición;
    cada violación es un dict con ``field``, ``code`` y ``message``.
    """

    def __init__(
        self,
        violations: List[dict[str, Any]],
        details: Optional[dict[str, Any]] = None,
    ):
        self.violations = list(violations)
        super().__init__(
            message=ApiErrorCode.VALIDATION_FAILED.reason,
            status_code=400,
            error=ApiErrorCode.VALIDATION_FAILED,
            details=details,
        )


class ConflictException(AppException):
    """Excepción cuando la operación choca con el estado actual de los datos."""

    def __init__(
        self,
        error: ApiErrorCode,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=error.reason, status_code=409, error=error, details=details)


class DatabaseException(AppException):
    """Excepción para errores de base de datos."""

    def __init__(
        self,
        message: str = "Error de base de datos",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)
