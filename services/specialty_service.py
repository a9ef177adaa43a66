"""
Service for Specialty business logic.
"""

import logging

from services.base_service import BaseService
from repositories.specialty_repository import SpecialtyRepository
from database.models import SpecialtyORM
from models.vets import SpecialtyRequest, SpecialtyResponse
from mappers import to_specialty_response

logger = logging.getLogger(__name__)


class SpecialtyService(BaseService[SpecialtyORM, SpecialtyRepository]):
    
    def __init__(self, repository: SpecialtyRepository):
        super().__init__(repository)
    
    def create(self, request: SpecialtyRequest) -> SpecialtyORM:
        created = self.repository.create(SpecialtyORM(name=request.name))
        self.repository.commit()
        
        logger.info(f"Specialty {created.id} created")
        return created
    
    def update(self, specialty_id: int, request: SpecialtyRequest) -> SpecialtyORM:
        specialty = self.find_by_id(specialty_id)
        specialty.name = request.name
        
        updated = self.repository.update(specialty)
        self.repository.commit()
        
        logger.info(f"Specialty {specialty_id} updated")
        return updated
    
    def _before_delete(self, entity: SpecialtyORM) -> None:
        #los veterinarios que la tenían la pierden
        self.repository.remove_vet_links(entity.id)
    
    def to_response(self, entity: SpecialtyORM) -> SpecialtyResponse:
        return to_specialty_response(entity)
