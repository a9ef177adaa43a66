"""
Service for Vaccination business logic.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.vaccination_repository import VaccinationRepository
from repositories.pet_repository import PetRepository
from database.models import VaccinationORM
from models.vaccinations import VaccinationRequest, VaccinationResponse
from mappers import to_vaccination_response
from core.error_codes import ApiErrorCode
from core.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class VaccinationService(BaseService[VaccinationORM, VaccinationRepository]):
    """Service for managing vaccination business logic."""
    
    def __init__(self, repository: VaccinationRepository, pet_repository: PetRepository):
        super().__init__(repository)
        self.pet_repo = pet_repository
    
    def find_by_pet_id(self, pet_id: int) -> List[VaccinationORM]:
        """
        Vacunas aplicadas a una mascota.
        
        Raises:
            NotFoundException: Si la mascota no existe
        """
        self.pet_repo.get_by_id_or_fail(pet_id)
        return self.repository.find_by_pet_id(pet_id)
    
    def find_by_id_and_pet_id(self, vaccination_id: int, pet_id: int) -> VaccinationORM:
        """Una vacuna de otra mascota se reporta igual que una inexistente."""
        self.pet_repo.get_by_id_or_fail(pet_id)
        vaccination = self.repository.get_by_id(vaccination_id)
        if vaccination is None or vaccination.pet_id != pet_id:
            raise NotFoundException(ApiErrorCode.VACCINATION_NOT_FOUND, identifier=vaccination_id)
        return vaccination
    
    def create(self, pet_id: int, request: VaccinationRequest) -> VaccinationORM:
        """
        Registra una vacuna aplicada a una mascota.
        
        Args:
            pet_id: ID de la mascota
            request: Vacuna, fecha de aplicación y próxima dosis opcional
            
        Returns:
            La vacuna creada
        """
        pet = self.pet_repo.get_by_id_or_fail(pet_id)
        
        vaccination_orm = VaccinationORM(
            vaccine_name=request.vaccine_name,
            vaccination_date=request.vaccination_date,
            next_due_date=request.next_due_date,
            pet_id=pet.id,
        )
        
        created = self.repository.create(vaccination_orm)
        self.repository.commit()
        
        logger.info(f"Vaccination {created.id} created for pet {pet_id}")
        return created
    
    def update(self, vaccination_id: int, request: VaccinationRequest) -> VaccinationORM:
        vaccination = self.find_by_id(vaccination_id)
        vaccination.vaccine_name = request.vaccine_name
        vaccination.vaccination_date = request.vaccination_date
        vaccination.next_due_date = request.next_due_date
        
        updated = self.repository.update(vaccination)
        self.repository.commit()
        
        logger.info(f"Vaccination {vaccination_id} updated")
        return updated
    
    def to_response(self, entity: VaccinationORM) -> VaccinationResponse:
        return to_vaccination_response(entity)
