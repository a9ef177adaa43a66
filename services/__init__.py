"""
Capa de servicio para la lógica de negocio.
Este paquete contiene clases de servicio que implementan la lógica de negocio
y orquestan las operaciones entre repositorios.
"""

from .base_service import BaseService
from .owner_service import OwnerService
from .pet_service import PetService
from .pet_type_service import PetTypeService
from .vet_service import VetService
from .specialty_service import SpecialtyService
from .visit_service import VisitService
from .vaccination_service import VaccinationService
from .appointment_service import AppointmentService

__all__ = [
    "BaseService",
    "OwnerService",
    "PetService",
    "PetTypeService",
    "VetService",
    "SpecialtyService",
    "VisitService",
    "VaccinationService",
    "AppointmentService",
]
