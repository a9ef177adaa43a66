"""
Repositorio para la entidad Vaccination.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from repositories.base_repository import BaseRepository
from database.models import VaccinationORM
from core.error_codes import ApiErrorCode
from core.exceptions import DatabaseException

logger = logging.getLogger(__name__)


class VaccinationRepository(BaseRepository[VaccinationORM]):
    """Repositorio para la entidad Vaccination."""
    
    def __init__(self, db: Session):
        super().__init__(db, VaccinationORM, ApiErrorCode.VACCINATION_NOT_FOUND)
    
    def find_by_pet_id(self, pet_id: int) -> List[VaccinationORM]:
        """
        Busca todas las vacunas aplicadas a una mascota.
        
        Returns:
            Lista de vacunas ordenada por id
        """
        try:
            return (
                self.db.query(VaccinationORM)
                .filter(VaccinationORM.pet_id == pet_id)
                .order_by(VaccinationORM.id.asc())
                .all()
            )
        except Exception as e:
            logger.error(f"Error finding vaccinations by pet {pet_id}: {e}")
            raise DatabaseException("Error al buscar vacunas por mascota")
    
    def delete_by_pet_id(self, pet_id: int) -> int:
        return self.delete_where(VaccinationORM.pet_id == pet_id)
