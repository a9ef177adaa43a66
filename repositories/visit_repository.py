"""
Repositorio para la entidad Visit.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import VisitORM
from core.error_codes import ApiErrorCode
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class VisitRepository(BaseRepository[VisitORM]):
    """Repositorio para la entidad Visit."""
    
    def __init__(self, db: Session):
        super().__init__(db, VisitORM, ApiErrorCode.VISIT_NOT_FOUND)
    
    def find_by_pet_id(self, pet_id: int) -> List[VisitORM]:
        """
        Busca todas las visitas de una mascota.
        
        Args:
            pet_id: ID de la mascota
            
        Returns:
            Lista de visitas ordenada por id
        """
        try:
            return (
                self.db.query(VisitORM)
                .filter(VisitORM.pet_id == pet_id)
                .order_by(VisitORM.id.asc())
                .all()
            )
        except Exception as e:
            logger.error(f"Error finding visits by pet {pet_id}: {e}")
            raise DatabaseException("Error al buscar visitas por mascota")
    
    def delete_by_pet_id(self, pet_id: int) -> int:
        return self.delete_where(VisitORM.pet_id == pet_id)
