"""
Modelos comunes para la API.

Base camelCase para todos los DTOs, respuestas de error estandarizadas
y validaciones reutilizables (texto no vacío, fechas pasadas / futuras).
"""
from typing import Annotated, Optional, List, Any
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from utils.datetime_utils import get_local_now, get_local_today, to_naive_local

# Rango de los identificadores: entero de 32 bits con signo
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1

EntityId = Annotated[int, Field(ge=ID_MIN, le=ID_MAX)]


class CamelModel(BaseModel):
    """Base de todos los DTOs: snake_case en Python, camelCase en JSON."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FieldViolation(CamelModel):
    """Violación de una regla sobre un campo concreto."""
    field: Optional[str] = Field(None, description="Campo rechazado (None si aplica a todo el cuerpo)")
    code: str = Field(..., description="Código simbólico de la violación")
    message: str = Field(..., description="Mensaje legible")


class ErrorResponse(CamelModel):
    """Respuesta estándar de error."""
    error_code: str = Field(..., description="Código de error (ERR-XXXX)")
    reason: str = Field(..., description="Motivo legible del error")
    method: str = Field(..., description="Método HTTP de la petición")
    uri: str = Field(..., description="URI de la petición")
    errors: List[FieldViolation] = Field(default_factory=list, description="Violaciones por campo")


class HealthCheckResponse(BaseModel):
    """Respuesta del health check."""
    status: str = Field(..., description="Estado general (healthy/unhealthy)")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
    database: str = Field(..., description="Estado de la base de datos")
    environment: str = Field(..., description="Entorno (production/development)")


def create_error_response(
    error_code: str,
    reason: str,
    method: str,
    uri: str,
    errors: Optional[List[dict[str, Any]]] = None,
) -> dict:
    """Helper para crear respuestas de error (ya serializadas a JSON)."""
    return ErrorResponse(
        error_code=error_code,
        reason=reason,
        method=method,
        uri=uri,
        errors=[FieldViolation(**violation) for violation in errors or []],
    ).model_dump(by_alias=True, mode="json")


# ==================== Validaciones reutilizables ====================

def ensure_not_blank(value: str) -> str:
    """Rechaza cadenas vacías o compuestas solo de espacios."""
    if value is None or not value.strip():
        raise PydanticCustomError("blank", "Value must not be blank")
    return value


def ensure_in_past(value: date) -> date:
    """La fecha debe ser anterior a hoy."""
    if value is not None and value >= get_local_today():
        raise PydanticCustomError("not_in_past", "Date must be in the past")
    return value


def ensure_in_future(value: datetime) -> datetime:
    """La fecha y hora debe ser posterior al momento actual."""
    if value is not None and to_naive_local(value) <= get_local_now().replace(tzinfo=None):
        raise PydanticCustomError("not_in_future", "Date and time must be in the future")
    return value
