"""
Repositorio para la entidad PetType.
"""

from sqlalchemy.orm import Session

from repositories.base_repository import BaseRepository
from database.models import PetTypeORM
from core.error_codes import ApiErrorCode


class PetTypeRepository(BaseRepository[PetTypeORM]):
    """Repositorio para los tipos de mascota (catálogo sin consultas propias)."""
    
    def __init__(self, db: Session):
        super().__init__(db, PetTypeORM, ApiErrorCode.PET_TYPE_NOT_FOUND)
