"""
Dependency injection for services and repositories.

This module provides FastAPI dependencies for injecting services
and repositories into route handlers. Every dependency of one request
shares the same database session.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from database.db import get_db
from repositories.owner_repository import OwnerRepository
from repositories.pet_repository import PetRepository
from repositories.pet_type_repository import PetTypeRepository
from repositories.vet_repository import VetRepository
from repositories.specialty_repository import SpecialtyRepository
from repositories.visit_repository import VisitRepository
from repositories.vaccination_repository import VaccinationRepository
from repositories.appointment_repository import AppointmentRepository
from services.owner_service import OwnerService
from services.pet_service import PetService
from services.pet_type_service import PetTypeService
from services.vet_service import VetService
from services.specialty_service import SpecialtyService
from services.visit_service import VisitService
from services.vaccination_service import VaccinationService
from services.appointment_service import AppointmentService


# ==================== Service Dependencies ====================

def get_pet_service(db: Session = Depends(get_db)) -> PetService:
    """
    Get PetService instance.
    
    Args:
        db: Database session (injected by FastAPI)
        
    Returns:
        PetService instance with injected repositories
    """
    return PetService(
        PetRepository(db),
        OwnerRepository(db),
        PetTypeRepository(db),
        VisitRepository(db),
        VaccinationRepository(db),
        AppointmentRepository(db),
    )


def get_owner_service(
    db: Session = Depends(get_db),
    pet_service: PetService = Depends(get_pet_service),
) -> OwnerService:
    """
    Get OwnerService instance.
    
    This is the main dependency to use in route handlers for owner operations.
    
    Example:
        ```python
        @router.get("/owners")
        def list_owners(
            service: OwnerService = Depends(get_owner_service)
        ):
            return service.to_response_list(service.find_all())
        ```
    """
    return OwnerService(OwnerRepository(db), pet_service)


def get_pet_type_service(db: Session = Depends(get_db)) -> PetTypeService:
    """Get PetTypeService instance."""
    return PetTypeService(PetTypeRepository(db), PetRepository(db))


def get_vet_service(db: Session = Depends(get_db)) -> VetService:
    """
    Get VetService instance.
    
    Returns:
        VetService instance with injected repositories
    """
    return VetService(VetRepository(db), SpecialtyRepository(db), AppointmentRepository(db))


def get_specialty_service(db: Session = Depends(get_db)) -> SpecialtyService:
    """Get SpecialtyService instance."""
    return SpecialtyService(SpecialtyRepository(db))


def get_visit_service(db: Session = Depends(get_db)) -> VisitService:
    """Get VisitService instance."""
    return VisitService(VisitRepository(db), PetRepository(db))


def get_vaccination_service(db: Session = Depends(get_db)) -> VaccinationService:
    """Get VaccinationService instance."""
    return VaccinationService(VaccinationRepository(db), PetRepository(db))


def get_appointment_service(db: Session = Depends(get_db)) -> AppointmentService:
    """
    Get AppointmentService instance.
    
    Returns:
        AppointmentService instance with injected repositories
    """
    return AppointmentService(AppointmentRepository(db), PetRepository(db), VetRepository(db))
