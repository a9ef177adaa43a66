"""
Repositorio para la entidad Owner.
Gestiona todas las operaciones de base de datos relacionadas con propietarios.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import OwnerORM
from core.error_codes import ApiErrorCode
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class OwnerRepository(BaseRepository[OwnerORM]):
    """Repositorio para la entidad Owner."""
    
    def __init__(self, db: Session):
        super().__init__(db, OwnerORM, ApiErrorCode.OWNER_NOT_FOUND)
    
    def find_by_last_name(self, last_name: str) -> List[OwnerORM]:
        """
        Busca propietarios por apellido (igualdad exacta, sensible a mayúsculas).
        
        Args:
            last_name: Apellido a buscar
            
        Returns:
            Lista de propietarios ordenada por id
        """
        try:
            return (
                self.db.query(OwnerORM)
                .filter(OwnerORM.last_name == last_name)
                .order_by(OwnerORM.id.asc())
                .all()
            )
        except Exception as e:
            logger.error(f"Error finding owners by last name {last_name}: {e}")
            raise DatabaseException("Error al buscar propietarios por apellido")
