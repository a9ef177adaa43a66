"""
Validadores de peticiones que no se expresan solo con el esquema de pydantic.
"""

from .owner_validator import (
    validate_create_owner_request,
    validate_update_owner_request,
)

__all__ = [
    "validate_create_owner_request",
    "validate_update_owner_request",
]
