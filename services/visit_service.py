"""
Service for Visit business logic.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.visit_repository import VisitRepository
from repositories.pet_repository import PetRepository
from database.models import VisitORM
from models.visits import VisitRequestBase, CreateVisitWithPetRequest, UpdateVisitRequest, VisitResponse
from mappers import to_visit_response
from core.error_codes import ApiErrorCode
from core.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class VisitService(BaseService[VisitORM, VisitRepository]):
    """Service for managing visit business logic."""
    
    def __init__(self, repository: VisitRepository, pet_repository: PetRepository):
        super().__init__(repository)
        self.pet_repo = pet_repository
    
    def find_by_pet_id(self, pet_id: int) -> List[VisitORM]:
        """
        Visitas de una mascota.
        
        Raises:
            NotFoundException: Si la mascota no existe
        """
        self.pet_repo.get_by_id_or_fail(pet_id)
        return self.repository.find_by_pet_id(pet_id)
    
    def find_by_id_and_pet_id(self, visit_id: int, pet_id: int) -> VisitORM:
        """
        Obtiene una visita comprobando que pertenece a la mascota.
        
        Raises:
            NotFoundException: PET_NOT_FOUND si la mascota no existe,
                VISIT_NOT_FOUND si la visita no existe o es de otra mascota
        """
        self.pet_repo.get_by_id_or_fail(pet_id)
        visit = self.repository.get_by_id(visit_id)
        if visit is None or visit.pet_id != pet_id:
            raise NotFoundException(ApiErrorCode.VISIT_NOT_FOUND, identifier=visit_id)
        return visit
    
    def create(self, pet_id: int, request: VisitRequestBase) -> VisitORM:
        """
        Registra una visita para una mascota.
        
        Raises:
            NotFoundException: Si la mascota no existe
        """
        pet = self.pet_repo.get_by_id_or_fail(pet_id)
        
        created = self.repository.create(
            VisitORM(date=request.date, description=request.description, pet_id=pet.id)
        )
        self.repository.commit()
        
        logger.info(f"Visit {created.id} created for pet {pet_id}")
        return created
    
    def create_with_pet(self, request: CreateVisitWithPetRequest) -> VisitORM:
        return self.create(request.pet_id, request)
    
    def update(self, visit_id: int, request: UpdateVisitRequest) -> VisitORM:
        visit = self.find_by_id(visit_id)
        visit.date = request.date
        visit.description = request.description
        
        updated = self.repository.update(visit)
        self.repository.commit()
        
        logger.info(f"Visit {visit_id} updated")
        return updated
    
    def to_response(self, entity: VisitORM) -> VisitResponse:
        return to_visit_response(entity)
