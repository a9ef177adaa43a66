""" Utilidades principales y componentes compartidos para la aplicación.

Este paquete contiene:

- Códigos de error de la API
- Excepciones personalizadas
- Manejadores de excepciones para FastAPI
- Funciones auxiliares
"""

from .error_codes import ApiErrorCode
from .exceptions import (
    AppException,
    NotFoundException,
    ValidationException,
    ConflictException,
    DatabaseException,
)
from .utils import (
    enum_to_value,
    unique_in_order,
)

__all__ = [
    # Códigos
    "ApiErrorCode",
    # Excepciones
    "AppException",
    "NotFoundException",
    "ValidationException",
    "ConflictException",
    "DatabaseException",
    # utils
    "enum_to_value",
    "unique_in_order",
]
