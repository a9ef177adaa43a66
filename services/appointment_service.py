"""
Service for Appointment business logic.

Las citas enlazan una mascota con un veterinario. El estado no sigue ningún
grafo de transiciones: cancelar o completar sobrescribe el estado actual.
"""

from typing import List, Optional
import logging

from services.base_service import BaseService
from repositories.appointment_repository import AppointmentRepository
from repositories.pet_repository import PetRepository
from repositories.vet_repository import VetRepository
from database.models import AppointmentORM
from models.appointments import (
    AppointmentStatus,
    CreateAppointmentRequest,
    UpdateAppointmentRequest,
    AppointmentResponse,
)
from mappers import to_appointment_response
from core.utils import enum_to_value
from utils.datetime_utils import to_naive_local

logger = logging.getLogger(__name__)


class AppointmentService(BaseService[AppointmentORM, AppointmentRepository]):
    """Service for managing appointment business logic."""
    
    def __init__(
        self,
        repository: AppointmentRepository,
        pet_repository: PetRepository,
        vet_repository: VetRepository,
    ):
        """
        Initialize appointment service.
        
        Args:
            repository: AppointmentRepository instance
            pet_repository: PetRepository instance
            vet_repository: VetRepository instance
        """
        super().__init__(repository)
        self.pet_repo = pet_repository
        self.vet_repo = vet_repository
    
    def find_by_pet_id(self, pet_id: int) -> List[AppointmentORM]:
        """
        Citas de una mascota.
        
        Raises:
            NotFoundException: Si la mascota no existe
        """
        self.pet_repo.get_by_id_or_fail(pet_id)
        return self.repository.find_by_pet_id(pet_id)
    
    def find_by_vet_id(self, vet_id: int) -> List[AppointmentORM]:
        """
        Citas asignadas a un veterinario.
        
        Raises:
            NotFoundException: Si el veterinario no existe
        """
        self.vet_repo.get_by_id_or_fail(vet_id)
        return self.repository.find_by_vet_id(vet_id)

    def find_filtered(
        self,
        pet_id: Optional[int] = None,
        vet_id: Optional[int] = None
    ) -> List[AppointmentORM]:
        """
        Lista de citas con filtros opcionales por mascota y/o veterinario.

        Sin filtros devuelve todas las citas. Con ambos filtros devuelve la
        intersección; un filtro que apunta a un registro inexistente es 404.
        """
        if pet_id is None and vet_id is None:
            return self.find_all()

        appointments = self.find_by_pet_id(pet_id) if pet_id is not None else None
        if vet_id is not None:
            by_vet = self.find_by_vet_id(vet_id)
            if appointments is None:
                appointments = by_vet
            else:
                appointments = [a for a in appointments if a.vet_id == vet_id]
        return appointments

    def create(self, request: CreateAppointmentRequest) -> AppointmentORM:
        """
        Agenda una nueva cita.
        
        Se resuelve primero la mascota y después el veterinario. Sin estado
        explícito la cita queda como SCHEDULED.
        
        Args:
            request: Datos de la cita
            
        Returns:
            La cita creada
            
        Raises:
            NotFoundException: Si la mascota o el veterinario no existen
        """
        pet = self.pet_repo.get_by_id_or_fail(request.pet_id)
        vet = self.vet_repo.get_by_id_or_fail(request.vet_id)
        
        appointment_orm = AppointmentORM(
            scheduled_date_time=to_naive_local(request.scheduled_date_time),
            reason=request.reason,
            status=enum_to_value(request.status or AppointmentStatus.SCHEDULED),
            pet_id=pet.id,
            vet_id=vet.id,
        )
        
        created = self.repository.create(appointment_orm)
        self.repository.commit()
        
        logger.info(f"Appointment {created.id} created for pet {pet.id} with vet {vet.id}")
        return created
    
    def update(self, appointment_id: int, request: UpdateAppointmentRequest) -> AppointmentORM:
        """
        Reemplaza fecha, motivo y estado de una cita.
        
        Raises:
            NotFoundException: Si la cita no existe
        """
        appointment = self.find_by_id(appointment_id)
        appointment.scheduled_date_time = to_naive_local(request.scheduled_date_time)
        appointment.reason = request.reason
        appointment.status = enum_to_value(request.status)
        
        updated = self.repository.update(appointment)
        self.repository.commit()
        
        logger.info(f"Appointment {appointment_id} updated")
        return updated
    
    def cancel(self, appointment_id: int) -> AppointmentORM:
        return self._set_status(appointment_id, AppointmentStatus.CANCELLED)
    
    def complete(self, appointment_id: int) -> AppointmentORM:
        return self._set_status(appointment_id, AppointmentStatus.COMPLETED)
    
    def _set_status(self, appointment_id: int, new_status: AppointmentStatus) -> AppointmentORM:
        appointment = self.find_by_id(appointment_id)
        previous = appointment.status
        appointment.status = enum_to_value(new_status)
        
        updated = self.repository.update(appointment)
        self.repository.commit()
        
        logger.info(f"Appointment {appointment_id} status {previous} -> {new_status.value}")
        return updated
    
    def to_response(self, entity: AppointmentORM) -> AppointmentResponse:
        return to_appointment_response(entity)
