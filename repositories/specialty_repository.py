"""
Repositorio para la entidad Specialty.
"""

from typing import List
from sqlalchemy import delete
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import SpecialtyORM, vet_specialties
from core.error_codes import ApiErrorCode
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class SpecialtyRepository(BaseRepository[SpecialtyORM]):
    """Repositorio para la entidad Specialty."""
    
    def __init__(self, db: Session):
        super().__init__(db, SpecialtyORM, ApiErrorCode.SPECIALTY_NOT_FOUND)
    
    def find_by_vet_id(self, vet_id: int) -> List[SpecialtyORM]:
        """
        Especialidades enlazadas a un veterinario.
        
        Returns:
            Lista de especialidades ordenada por id
        """
        try:
            return (
                self.db.query(SpecialtyORM)
                .join(vet_specialties, vet_specialties.c.specialty_id == SpecialtyORM.id)
                .filter(vet_specialties.c.vet_id == vet_id)
                .order_by(SpecialtyORM.id.asc())
                .all()
            )
        except Exception as e:
            logger.error(f"Error finding specialties by vet {vet_id}: {e}")
            raise DatabaseException("Error al buscar especialidades por veterinario")
    
    def remove_vet_links(self, specialty_id: int) -> None:
        """Desvincula la especialidad de todos los veterinarios."""
        try:
            self.db.execute(
                delete(vet_specialties).where(vet_specialties.c.specialty_id == specialty_id)
            )
            self.db.flush()
        except Exception as e:
            logger.error(f"Error unlinking specialty {specialty_id}: {e}")
            self.db.rollback()
            raise DatabaseException("Error al desvincular la especialidad")
