"""
Códigos de error de la API.

Cada código tiene un identificador estable (``ERR-XXXX``) y un motivo legible
que se devuelve tal cual en el cuerpo de error.
"""

from enum import Enum


class ApiErrorCode(Enum):
    """Código y motivo de cada error conocido por la API."""

    INTERNAL_SERVER_ERROR = (
        "ERR-0001",
        "Uncaught Exception: You think I know what went wrong here? If I did, I would've caught this exception no?",
    )
    OWNER_NOT_FOUND = ("ERR-0002", "The requested owner does not exist.")
    PET_NOT_FOUND = ("ERR-0003", "The requested pet does not exist.")
    PET_TYPE_NOT_FOUND = ("ERR-0004", "The requested pet type does not exist.")
    VET_NOT_FOUND = ("ERR-0005", "The requested vet does not exist.")
    SPECIALTY_NOT_FOUND = ("ERR-0006", "The requested specialty does not exist.")
    VISIT_NOT_FOUND = ("ERR-0007", "The requested visit does not exist.")
    VACCINATION_NOT_FOUND = ("ERR-0008", "The requested vaccination does not exist.")
    APPOINTMENT_NOT_FOUND = ("ERR-0009", "The requested appointment does not exist.")
    VALIDATION_FAILED = ("ERR-0010", "The request contains invalid data.")
    PET_TYPE_IN_USE = ("ERR-0011", "The pet type is still assigned to one or more pets.")

    def __init__(self, error_code: str, reason: str):
        self.error_code = error_code
        self.reason = reason
