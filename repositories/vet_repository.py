"""
Repositorio para la entidad Vet.
Incluye el mantenimiento de la tabla de enlace ``vet_specialties``.
"""

from typing import Iterable
from sqlalchemy import delete, insert
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import VetORM, vet_specialties
from core.error_codes import ApiErrorCode
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class VetRepository(BaseRepository[VetORM]):
    """Repositorio para la entidad Vet."""
    
    def __init__(self, db: Session):
        super().__init__(db, VetORM, ApiErrorCode.VET_NOT_FOUND)
    
    def clear_specialties(self, vet_id: int) -> None:
        """Elimina todos los enlaces del veterinario con especialidades."""
        try:
            self.db.execute(delete(vet_specialties).where(vet_specialties.c.vet_id == vet_id))
            self.db.flush()
        except Exception as e:
            logger.error(f"Error clearing specialties of vet {vet_id}: {e}")
            self.db.rollback()
            raise DatabaseException("Error al eliminar especialidades del veterinario")
    
    def replace_specialties(self, vet_id: int, specialty_ids: Iterable[int]) -> None:
        """
        Sustituye el conjunto de especialidades de un veterinario.
        
        Args:
            vet_id: ID del veterinario
            specialty_ids: IDs ya validados y sin duplicados
        """
        self.clear_specialties(vet_id)
        rows = [{"vet_id": vet_id, "specialty_id": specialty_id} for specialty_id in specialty_ids]
        if not rows:
            return
        try:
            self.db.execute(insert(vet_specialties), rows)
            self.db.flush()
        except Exception as e:
            logger.error(f"Error linking specialties to vet {vet_id}: {e}")
            self.db.rollback()
            raise DatabaseException("Error al asignar especialidades al veterinario")
