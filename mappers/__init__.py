"""
Conversión de entidades ORM a DTOs de respuesta.

Funciones puras: las colecciones hijas (mascotas de un propietario, visitas de
una mascota, especialidades de un veterinario) las carga el servicio y se
pasan explícitamente.
"""

from .owner_mapper import to_owner_response, to_pet_summary
from .pet_mapper import to_pet_response, to_pet_type_response, to_visit_summary
from .vet_mapper import to_vet_response, to_specialty_response
from .visit_mapper import to_visit_response
from .vaccination_mapper import to_vaccination_response
from .appointment_mapper import to_appointment_response

__all__ = [
    "to_owner_response",
    "to_pet_summary",
    "to_pet_response",
    "to_pet_type_response",
    "to_visit_summary",
    "to_vet_response",
    "to_specialty_response",
    "to_visit_response",
    "to_vaccination_response",
    "to_appointment_response",
]
