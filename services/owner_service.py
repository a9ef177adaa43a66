"""
Service for Owner business logic.

Handles all business operations related to owners. Request bodies are
checked with ``validators.owner_validator`` before anything is read or
written.
"""

from typing import List, Optional
import logging

from services.base_service import BaseService
from services.pet_service import PetService
from repositories.owner_repository import OwnerRepository
from database.models import OwnerORM
from models.owners import CreateOwnerRequest, UpdateOwnerRequest, OwnerResponse
from validators.owner_validator import (
    validate_create_owner_request,
    validate_update_owner_request,
)
from mappers import to_owner_response

logger = logging.getLogger(__name__)


class OwnerService(BaseService[OwnerORM, OwnerRepository]):
    """Service for managing owner business logic."""
    
    def __init__(self, repository: OwnerRepository, pet_service: PetService):
        """
        Initialize owner service.
        
        Args:
            repository: OwnerRepository instance
            pet_service: PetService usado para cargar y eliminar las mascotas
        """
        super().__init__(repository)
        self.pet_service = pet_service
    
    def find_by_last_name(self, last_name: Optional[str] = None) -> List[OwnerORM]:
        """
        Busca propietarios por apellido exacto.
        
        Sin apellido devuelve todos los propietarios.
        """
        if last_name is None:
            return self.find_all()
        return self.repository.find_by_last_name(last_name)
    
    def create(self, request: Optional[CreateOwnerRequest]) -> OwnerORM:
        """
        Crea un nuevo propietario.
        
        Args:
            request: Datos del propietario (None si la petición no tenía cuerpo)
            
        Returns:
            El propietario creado
            
        Raises:
            ValidationException: Con todas las violaciones del cuerpo
        """
        validate_create_owner_request(request)
        
        owner_orm = OwnerORM(
            first_name=request.first_name,
            last_name=request.last_name,
            address=request.address,
            city=request.city,
            telephone=request.telephone,
            email=request.email,
        )
        
        created = self.repository.create(owner_orm)
        self.repository.commit()
        
        logger.info(f"Owner {created.id} created")
        return created
    
    def update(self, owner_id: int, request: Optional[UpdateOwnerRequest]) -> OwnerORM:
        """
        Reemplaza todos los datos de un propietario.
        
        Raises:
            ValidationException: Si el cuerpo no es válido
            NotFoundException: Si el propietario no existe
        """
        validate_update_owner_request(request)
        owner = self.find_by_id(owner_id)
        
        owner.first_name = request.first_name
        owner.last_name = request.last_name
        owner.address = request.address
        owner.city = request.city
        owner.telephone = request.telephone
        owner.email = request.email
        
        updated = self.repository.update(owner)
        self.repository.commit()
        
        logger.info(f"Owner {owner_id} updated")
        return updated
    
    def _before_delete(self, entity: OwnerORM) -> None:
        pets = self.pet_service.repository.find_by_owner_id(entity.id)
        for pet in pets:
            self.pet_service.delete_dependents(pet.id)
        self.pet_service.repository.delete_by_owner_id(entity.id)
        
        logger.info(f"Removing owner {entity.id} with {len(pets)} pets")
    
    def to_response(self, entity: OwnerORM) -> OwnerResponse:
        return to_owner_response(entity, self.pet_service.repository.find_by_owner_id(entity.id))
