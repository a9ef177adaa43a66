"""
Service for Pet business logic.

Handles all business operations related to pets, including the cascade
removal of their appointments, visits and vaccinations.
"""

from typing import List
import logging

from services.base_service import BaseService
from repositories.pet_repository import PetRepository
from repositories.owner_repository import OwnerRepository
from repositories.pet_type_repository import PetTypeRepository
from repositories.visit_repository import VisitRepository
from repositories.vaccination_repository import VaccinationRepository
from repositories.appointment_repository import AppointmentRepository
from database.models import PetORM
from models.pets import PetRequestBase, CreatePetWithOwnerRequest, UpdatePetRequest, PetResponse
from mappers import to_pet_response
from core.error_codes import ApiErrorCode
from core.exceptions import NotFoundException

logger = logging.getLogger(__name__)


class PetService(BaseService[PetORM, PetRepository]):
    """Service for managing pet business logic."""
    
    def __init__(
        self,
        repository: PetRepository,
        owner_repository: OwnerRepository,
        pet_type_repository: PetTypeRepository,
        visit_repository: VisitRepository,
        vaccination_repository: VaccinationRepository,
        appointment_repository: AppointmentRepository,
    ):
        super().__init__(repository)
        self.owner_repo = owner_repository
        self.pet_type_repo = pet_type_repository
        self.visit_repo = visit_repository
        self.vaccination_repo = vaccination_repository
        self.appointment_repo = appointment_repository
    
    def find_by_owner_id(self, owner_id: int) -> List[PetORM]:
        """
        Mascotas de un propietario.
        
        Raises:
            NotFoundException: Si el propietario no existe
        """
        self.owner_repo.get_by_id_or_fail(owner_id)
        return self.repository.find_by_owner_id(owner_id)
    
    def find_by_id_and_owner_id(self, pet_id: int, owner_id: int) -> PetORM:
        """
        Obtiene una mascota comprobando que pertenece al propietario.
        
        Una mascota de otro propietario se reporta igual que una inexistente.
        
        Raises:
            NotFoundException: OWNER_NOT_FOUND si el propietario no existe,
                PET_NOT_FOUND si la mascota no existe o no es suya
        """
        self.owner_repo.get_by_id_or_fail(owner_id)
        pet = self.repository.get_by_id(pet_id)
        if pet is None or pet.owner_id != owner_id:
            raise NotFoundException(ApiErrorCode.PET_NOT_FOUND, identifier=pet_id)
        return pet
    
    def create(self, owner_id: int, request: PetRequestBase) -> PetORM:
        """
        Crea una mascota para un propietario.
        
        Se resuelve primero el propietario y después el tipo de mascota.
        
        Args:
            owner_id: ID del propietario
            request: Datos de la mascota
            
        Returns:
            La mascota creada
        """
        owner = self.owner_repo.get_by_id_or_fail(owner_id)
        pet_type = self.pet_type_repo.get_by_id_or_fail(request.type_id)
        
        pet_orm = PetORM(
            name=request.name,
            birth_date=request.birth_date,
            owner_id=owner.id,
            type=pet_type,
        )
        
        created = self.repository.create(pet_orm)
        self.repository.commit()
        
        logger.info(f"Pet {created.id} created for owner {owner_id}")
        return created
    
    def create_with_owner(self, request: CreatePetWithOwnerRequest) -> PetORM:
        """Alta desde la ruta global: el propietario viene en el cuerpo."""
        return self.create(request.owner_id, request)
    
    def update(self, pet_id: int, request: UpdatePetRequest) -> PetORM:
        """
        Reemplaza nombre, fecha de nacimiento y tipo de una mascota.
        
        Raises:
            NotFoundException: Si la mascota o el tipo no existen
        """
        pet = self.find_by_id(pet_id)
        pet_type = self.pet_type_repo.get_by_id_or_fail(request.type_id)
        
        pet.name = request.name
        pet.birth_date = request.birth_date
        pet.type = pet_type
        
        updated = self.repository.update(pet)
        self.repository.commit()
        
        logger.info(f"Pet {pet_id} updated")
        return updated
    
    def delete_dependents(self, pet_id: int) -> None:
        """Elimina citas, visitas y vacunas de la mascota (sin commit)."""
        self.appointment_repo.delete_by_pet_id(pet_id)
        self.visit_repo.delete_by_pet_id(pet_id)
        self.vaccination_repo.delete_by_pet_id(pet_id)
    
    def _before_delete(self, entity: PetORM) -> None:
        self.delete_dependents(entity.id)
    
    def to_response(self, entity: PetORM) -> PetResponse:
        return to_pet_response(entity, self.visit_repo.find_by_pet_id(entity.id))
