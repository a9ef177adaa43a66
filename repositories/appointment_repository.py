"""
Repositorio para la entidad Appointment.
Gestiona todas las operaciones de base de datos relacionadas con citas.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import AppointmentORM
from core.error_codes import ApiErrorCode
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class AppointmentRepository(BaseRepository[AppointmentORM]):
    """Repositorio para la entidad Appointment."""
    
    def __init__(self, db: Session):
        super().__init__(db, AppointmentORM, ApiErrorCode.APPOINTMENT_NOT_FOUND)
    
    def find_by_pet_id(self, pet_id: int) -> List[AppointmentORM]:
        """
        Busca todas las citas de una mascota.
        
        Args:
            pet_id: ID de la mascota
            
        Returns:
            Lista de citas ordenada por id
        """
        try:
            return (
                self.db.query(AppointmentORM)
                .filter(AppointmentORM.pet_id == pet_id)
                .order_by(AppointmentORM.id.asc())
                .all()
            )
        except Exception as e:
            logger.error(f"Error finding appointments by pet {pet_id}: {e}")
            raise DatabaseException("Error al buscar citas por mascota")
    
    def find_by_vet_id(self, vet_id: int) -> List[AppointmentORM]:
        """
        Busca todas las citas asignadas a un veterinario.
        
        Args:
            vet_id: ID del veterinario
            
        Returns:
            Lista de citas ordenada por id
        """
        try:
            return (
                self.db.query(AppointmentORM)
                .filter(AppointmentORM.vet_id == vet_id)
                .order_by(AppointmentORM.id.asc())
                .all()
            )
        except Exception as e:
            logger.error(f"Error finding appointments by vet {vet_id}: {e}")
            raise DatabaseException("Error al buscar citas por veterinario")
    
    def delete_by_pet_id(self, pet_id: int) -> int:
        return self.delete_where(AppointmentORM.pet_id == pet_id)
    
    def delete_by_vet_id(self, vet_id: int) -> int:
        return self.delete_where(AppointmentORM.vet_id == vet_id)
