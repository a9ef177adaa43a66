"""
Repositorio base con operaciones CRUD comunes:
Este repositorio genérico proporciona operaciones de base de datos estándar
que se pueden reutilizar en todos los repositorios de entidades
"""

from typing import TypeVar, Generic, List, Optional, Type
from sqlalchemy.orm import Session
import logging

from core.error_codes import ApiErrorCode
from core.exceptions import NotFoundException, DatabaseException

logger = logging.getLogger(__name__)

T = TypeVar('T')


class BaseRepository(Generic[T]):
    """
    Repositorio genérico proporciona operaciones CRUD estándar
    
    Esta clase debe ser heredada por repositorios de entidades específicos.
    Los repositorios nunca hacen commit por su cuenta: solo ``flush``; el
    servicio confirma la transacción al final de cada operación.
    """
    
    def __init__(self, db: Session, model_class: Type[T], not_found_error: ApiErrorCode):
        """
        Inicializa el repositorio.
        
        Args:
            db: Sesión SQLAlchemy
            model_class: Clase del modelo ORM para este repositorio
            not_found_error: Código de error cuando la entidad no existe
        """
        self.db = db
        self.model_class = model_class
        self.not_found_error = not_found_error
    
    def get_by_id(self, id: int) -> Optional[T]:
        """
        Obtiene una entidad por su ID.
        
        Args:
            id: ID de la entidad
            
        Returns:
            The entity or None if not found
        """
        try:
            return self.db.get(self.model_class, id)
        except Exception as e:
            logger.error(f"Error getting {self.model_class.__name__} by id {id}: {e}")
            raise DatabaseException(f"Error al obtener {self.model_class.__name__}")
    
    def get_by_id_or_fail(self, id: int) -> T:
        """
        Obtiene una entidad por su ID o lanza una excepción si no se encuentra.
        
        Raises:
            NotFoundException: If entity is not found
        """
        entity = self.get_by_id(id)
        if entity is None:
            raise NotFoundException(self.not_found_error, identifier=id)
        return entity
    
    def get_all(self) -> List[T]:
        """
        Obtiene todas las entidades ordenadas por id.
        
        Returns:
            List of entities (vacía si no hay ninguna)
        """
        try:
            return self.db.query(self.model_class).order_by(self.model_class.id.asc()).all()
        except Exception as e:
            logger.error(f"Error getting all {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al listar {self.model_class.__name__}")
    
    def count(self, **filters) -> int:
        """
        Cuenta las entidades que coinciden con los filtros.
        
        Args:
            **filters: Filtros de igualdad como keyword arguments
            
        Returns:
            Count of matching entities
        """
        try:
            query = self.db.query(self.model_class)
            for field, value in filters.items():
                if hasattr(self.model_class, field) and value is not None:
                    query = query.filter(getattr(self.model_class, field) == value)
            return query.count()
        except Exception as e:
            logger.error(f"Error counting {self.model_class.__name__}: {e}")
            raise DatabaseException(f"Error al contar {self.model_class.__name__}")
    
    def create(self, entity: T) -> T:
        """
        Crea una nueva entidad.
        
        Args:
            entity: La entidad a crear
            
        Returns:
            The created entity (con el id asignado por la base de datos)
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except Exception as e:
            logger.error(f"Error creating {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al crear {self.model_class.__name__}")
    
    def update(self, entity: T) -> T:
        """
        Actualiza una entidad existente.
        
        Args:
            entity: La entidad a actualizar
            
        Returns:
            The updated entity
        """
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
            return entity
        except Exception as e:
            logger.error(f"Error updating {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al actualizar {self.model_class.__name__}")
    
    def delete(self, entity: T) -> None:
        """
        Elimina una entidad de forma definitiva.
        
        Args:
            entity: La entidad a eliminar
        """
        try:
            self.db.delete(entity)
            self.db.flush()
        except Exception as e:
            logger.error(f"Error deleting {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al eliminar {self.model_class.__name__}")
    
    def delete_where(self, *criteria) -> int:
        """
        Elimina en bloque las entidades que cumplen los criterios.
        
        Returns:
            Número de filas eliminadas
        """
        try:
            deleted = (
                self.db.query(self.model_class)
                .filter(*criteria)
                .delete(synchronize_session=False)
            )
            self.db.flush()
            return deleted
        except Exception as e:
            logger.error(f"Error bulk deleting {self.model_class.__name__}: {e}")
            self.db.rollback()
            raise DatabaseException(f"Error al eliminar {self.model_class.__name__}")
    
    def commit(self) -> None:
        """Realiza el commit de la transacción actual."""
        try:
            self.db.commit()
        except Exception as e:
            logger.error(f"Error committing transaction: {e}")
            self.db.rollback()
            raise DatabaseException("Error al guardar cambios en la base de datos")
