"""
Capa de repositorio para el acceso a datos.
Este paquete contiene clases de repositorio que gestionan todas las operaciones de la base de datos.
Los repositorios proporcionan una abstracción sobre el ORM y no deben contener
lógica de negocio.

"""

from .base_repository import BaseRepository
from .owner_repository import OwnerRepository
from .pet_repository import PetRepository
from .pet_type_repository import PetTypeRepository
from .vet_repository import VetRepository
from .specialty_repository import SpecialtyRepository
from .visit_repository import VisitRepository
from .vaccination_repository import VaccinationRepository
from .appointment_repository import AppointmentRepository

__all__ = [
    "BaseRepository",
    "OwnerRepository",
    "PetRepository",
    "PetTypeRepository",
    "VetRepository",
    "SpecialtyRepository",
    "VisitRepository",
    "VaccinationRepository",
    "AppointmentRepository",
]
