"""
Validación de las peticiones de propietarios.

A diferencia del resto de recursos, los propietarios se validan aquí y no
en el esquema: se recorren todos los campos, se acumulan las violaciones
y se lanza una única ``ValidationException`` con todas ellas.

Cada campo tiene una cadena de reglas ordenada; la primera que falla
produce la violación del campo y las siguientes no se evalúan.
"""

import re
from typing import Any, Callable, List, Optional, Tuple

from core.exceptions import ValidationException
from models.owners import CreateOwnerRequest, OwnerRequestBase, UpdateOwnerRequest

MAX_LENGTH = 255

BODY_IS_MISSING = "Request body is missing"
FIRST_NAME_REQUIRED = "First name is required"
FIRST_NAME_TOO_LONG = "First name must not exceed 255 characters"
LAST_NAME_REQUIRED = "Last name is required"
LAST_NAME_TOO_LONG = "Last name must not exceed 255 characters"
ADDRESS_TOO_LONG = "Address must not exceed 255 characters"
CITY_TOO_LONG = "City must not exceed 255 characters"
TELEPHONE_TOO_LONG = "Telephone must not exceed 255 characters"
TELEPHONE_INVALID_FORMAT = "Telephone must contain only digits"
EMAIL_TOO_LONG = "Email must not exceed 255 characters"
EMAIL_INVALID_FORMAT = "Email must be a valid email address"

DIGITS = re.compile(r"[0-9]+")
EMAIL = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s]+")

# (código, mensaje, predicado que indica que la regla falla)
Rule = Tuple[str, str, Callable[[Optional[str]], bool]]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _too_long(value: Optional[str]) -> bool:
    return value is not None and len(value) > MAX_LENGTH


def _not_digits(value: Optional[str]) -> bool:
    return bool(value) and DIGITS.fullmatch(value) is None


def _not_email(value: Optional[str]) -> bool:
    return bool(value) and EMAIL.fullmatch(value) is None


OWNER_RULES: List[Tuple[str, List[Rule]]] = [
    ("firstName", [
        ("required", FIRST_NAME_REQUIRED, _is_blank),
        ("too_long", FIRST_NAME_TOO_LONG, _too_long),
    ]),
    ("lastName", [
        ("required", LAST_NAME_REQUIRED, _is_blank),
        ("too_long", LAST_NAME_TOO_LONG, _too_long),
    ]),
    ("address", [
        ("too_long", ADDRESS_TOO_LONG, _too_long),
    ]),
    ("city", [
        ("too_long", CITY_TOO_LONG, _too_long),
    ]),
    ("telephone", [
        ("too_long", TELEPHONE_TOO_LONG, _too_long),
        ("invalid_format", TELEPHONE_INVALID_FORMAT, _not_digits),
    ]),
    ("email", [
        ("too_long", EMAIL_TOO_LONG, _too_long),
        ("invalid_format", EMAIL_INVALID_FORMAT, _not_email),
    ]),
]


def _collect_violations(request: Optional[OwnerRequestBase]) -> List[dict[str, Any]]:
    if request is None:
        return [{"field": None, "code": "body_missing", "message": BODY_IS_MISSING}]

    data = request.model_dump(by_alias=True)
    violations = []
    for field, rules in OWNER_RULES:
        value = data.get(field)
        for code, message, fails in rules:
            if fails(value):
                violations.append({"field": field, "code": code, "message": message})
                break
    return violations


def _validate(request: Optional[OwnerRequestBase]) -> None:
    violations = _collect_violations(request)
    if violations:
        raise ValidationException(violations)


def validate_create_owner_request(request: Optional[CreateOwnerRequest]) -> None:
    """
    Valida la petición de alta de un propietario.
    
    Raises:
        ValidationException: Con todas las violaciones encontradas
    """
    _validate(request)


def validate_update_owner_request(request: Optional[UpdateOwnerRequest]) -> None:
    """
    Valida la petición de modificación de un propietario.
    
    Raises:
        ValidationException: Con todas las violaciones encontradas
    """
    _validate(request)
