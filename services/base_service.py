"""
Servicio base con operaciones de lógica de negocio comunes.
Esta clase proporciona una base para las clases de servicio que implementan
la lógica de negocio y coordinan las operaciones del repositorio.
"""

from typing import TypeVar, Generic, List, Any
import logging

from repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

# Type variables
T = TypeVar('T')  # ORM Model
R = TypeVar('R', bound=BaseRepository)  # Repository


class BaseService(Generic[T, R]):
    """
    Servicio base que proporciona operaciones lógicas de negocio comunes.
    Esta clase debe ser heredada por servicios de entidades específicas.
    
    Cada operación que modifica datos hace un único commit al final; si algo
    falla antes, la sesión de la petición se cierra sin confirmar nada.
    """
    
    def __init__(self, repository: R):
        """
        Inicializa el servicio.
        
        Args:
            repository: The repository instance for data access
        """
        self.repository = repository
    
    def find_all(self) -> List[T]:
        """Todas las entidades ordenadas por id."""
        return self.repository.get_all()
    
    def find_by_id(self, id: int) -> T:
        """
        Obtiene una entidad por su ID.
        
        Raises:
            NotFoundException: If entity is not found
        """
        return self.repository.get_by_id_or_fail(id)
    
    def delete(self, id: int) -> None:
        """
        Elimina una entidad junto con sus dependientes.
        
        Args:
            id: ID de la entidad
            
        Raises:
            NotFoundException: If entity is not found
        """
        entity = self.find_by_id(id)
        self._before_delete(entity)
        self.repository.delete(entity)
        self.repository.commit()
        
        logger.info(f"{self.repository.model_class.__name__} {id} deleted")
    
    def _before_delete(self, entity: T) -> None:
        """Hook para eliminar dependientes o rechazar el borrado."""
        pass
    
    def to_response(self, entity: T) -> Any:
        raise NotImplementedError
    
    def to_response_list(self, entities: List[T]) -> List[Any]:
        return [self.to_response(entity) for entity in entities]
