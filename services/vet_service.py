"""
Service for Vet business logic.

Un veterinario se crea y se modifica junto con su conjunto de especialidades;
todas deben existir antes de escribir nada.
"""

from typing import Iterable, List
import logging

from services.base_service import BaseService
from repositories.vet_repository import VetRepository
from repositories.specialty_repository import SpecialtyRepository
from repositories.appointment_repository import AppointmentRepository
from database.models import VetORM, SpecialtyORM
from models.vets import VetRequest, VetResponse
from mappers import to_vet_response
from core.utils import unique_in_order

logger = logging.getLogger(__name__)


class VetService(BaseService[VetORM, VetRepository]):
    """Service for managing vet business logic."""
    
    def __init__(
        self,
        repository: VetRepository,
        specialty_repository: SpecialtyRepository,
        appointment_repository: AppointmentRepository,
    ):
        super().__init__(repository)
        self.specialty_repo = specialty_repository
        self.appointment_repo = appointment_repository
    
    def _resolve_specialties(self, specialty_ids: Iterable[int]) -> List[SpecialtyORM]:
        """
        Resuelve los IDs de especialidad en orden; los duplicados se ignoran.
        
        Raises:
            NotFoundException: SPECIALTY_NOT_FOUND con el primer ID inexistente
        """
        return [self.specialty_repo.get_by_id_or_fail(specialty_id)
                for specialty_id in unique_in_order(specialty_ids)]
    
    def create(self, request: VetRequest) -> VetORM:
        """
        Crea un veterinario con sus especialidades.
        
        Args:
            request: Nombre y lista de IDs de especialidad
            
        Returns:
            El veterinario creado
        """
        specialties = self._resolve_specialties(request.specialty_ids)
        
        created = self.repository.create(
            VetORM(first_name=request.first_name, last_name=request.last_name)
        )
        self.repository.replace_specialties(created.id, [s.id for s in specialties])
        self.repository.commit()
        
        logger.info(f"Vet {created.id} created with {len(specialties)} specialties")
        return created
    
    def update(self, vet_id: int, request: VetRequest) -> VetORM:
        """
        Reemplaza nombre y especialidades de un veterinario.
        
        Raises:
            NotFoundException: Si el veterinario o alguna especialidad no existen
        """
        vet = self.find_by_id(vet_id)
        specialties = self._resolve_specialties(request.specialty_ids)
        
        vet.first_name = request.first_name
        vet.last_name = request.last_name
        
        updated = self.repository.update(vet)
        self.repository.replace_specialties(vet_id, [s.id for s in specialties])
        self.repository.commit()
        
        logger.info(f"Vet {vet_id} updated")
        return updated
    
    def _before_delete(self, entity: VetORM) -> None:
        self.appointment_repo.delete_by_vet_id(entity.id)
        self.repository.clear_specialties(entity.id)
    
    def to_response(self, entity: VetORM) -> VetResponse:
        return to_vet_response(entity, self.specialty_repo.find_by_vet_id(entity.id))
