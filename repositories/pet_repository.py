"""
Repositorio para la entidad Pet.
Gestiona todas las operaciones de base de datos relacionadas con mascotas.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import PetORM
from core.error_codes import ApiErrorCode
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class PetRepository(BaseRepository[PetORM]):
    """Repositorio para la entidad Pet."""
    
    def __init__(self, db: Session):
        super().__init__(db, PetORM, ApiErrorCode.PET_NOT_FOUND)
    
    def find_by_owner_id(self, owner_id: int) -> List[PetORM]:
        """
        Busca todas las mascotas de un propietario.
        
        Args:
            owner_id: ID del propietario
            
        Returns:
            Lista de mascotas ordenada por id
        """
        try:
            return (
                self.db.query(PetORM)
                .filter(PetORM.owner_id == owner_id)
                .order_by(PetORM.id.asc())
                .all()
            )
        except Exception as e:
            logger.error(f"Error finding pets by owner {owner_id}: {e}")
            raise DatabaseException("Error al buscar mascotas por propietario")
    
    def count_by_type_id(self, type_id: int) -> int:
        """Cuenta las mascotas que usan un tipo de mascota."""
        return self.count(type_id=type_id)
    
    def delete_by_owner_id(self, owner_id: int) -> int:
        return self.delete_where(PetORM.owner_id == owner_id)
