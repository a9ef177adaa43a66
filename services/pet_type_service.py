"""
Service for PetType business logic.
"""

import logging

from services.base_service import BaseService
from repositories.pet_type_repository import PetTypeRepository
from repositories.pet_repository import PetRepository
from database.models import PetTypeORM
from models.pets import PetTypeRequest, PetTypeResponse
from mappers import to_pet_type_response
from core.error_codes import ApiErrorCode
from core.exceptions import ConflictException

logger = logging.getLogger(__name__)


class PetTypeService(BaseService[PetTypeORM, PetTypeRepository]):
    """Catálogo de tipos de mascota."""
    
    def __init__(self, repository: PetTypeRepository, pet_repository: PetRepository):
        super().__init__(repository)
        self.pet_repo = pet_repository
    
    def create(self, request: PetTypeRequest) -> PetTypeORM:
        created = self.repository.create(PetTypeORM(name=request.name))
        self.repository.commit()
        
        logger.info(f"PetType {created.id} created")
        return created
    
    def update(self, pet_type_id: int, request: PetTypeRequest) -> PetTypeORM:
        pet_type = self.find_by_id(pet_type_id)
        pet_type.name = request.name
        
        updated = self.repository.update(pet_type)
        self.repository.commit()
        
        logger.info(f"PetType {pet_type_id} updated")
        return updated
    
    def _before_delete(self, entity: PetTypeORM) -> None:
        """Un tipo asignado a alguna mascota no se puede eliminar."""
        in_use = self.pet_repo.count_by_type_id(entity.id)
        if in_use:
            raise ConflictException(
                ApiErrorCode.PET_TYPE_IN_USE,
                details={"id": entity.id, "pets": in_use},
            )
    
    def to_response(self, entity: PetTypeORM) -> PetTypeResponse:
        return to_pet_type_response(entity)
