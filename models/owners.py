from pydantic import Field
from typing import Optional, List
from datetime import date

from models.common import CamelModel


class OwnerRequestBase(CamelModel):
    """
    Campos de entrada de un propietario.

    Todos son opcionales a nivel de esquema: las reglas (obligatorio,
    longitud, formato) las aplica ``validators.owner_validator`` para poder
    reportar todas las violaciones juntas.
    """
    first_name: Optional[str] = Field(None, examples=["George"])
    last_name: Optional[str] = Field(None, examples=["Franklin"])
    address: Optional[str] = Field(None, examples=["110 W. Liberty St."])
    city: Optional[str] = Field(None, examples=["Madison"])
    telephone: Optional[str] = Field(None, examples=["6085551023"])
    email: Optional[str] = Field(None, examples=["george.franklin@example.com"])


class CreateOwnerRequest(OwnerRequestBase):
    """Crear un nuevo propietario."""
    pass


class UpdateOwnerRequest(OwnerRequestBase):
    """Reemplazar todos los datos de un propietario existente."""
    pass


class PetSummaryResponse(CamelModel):
    """Resumen de una mascota dentro de la respuesta de su propietario."""
    id: int
    name: str
    birth_date: date
    type_name: Optional[str] = None


class OwnerResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    address: Optional[str] = None
    city: Optional[str] = None
    telephone: Optional[str] = None
    email: Optional[str] = None
    pets: List[PetSummaryResponse] = Field(default_factory=list)
