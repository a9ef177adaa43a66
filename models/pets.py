from pydantic import Field, field_validator
from typing import List, Optional
from datetime import date

from models.common import CamelModel, ID_MIN, ID_MAX, ensure_not_blank, ensure_in_past


# ==================== Pet types ====================

class PetTypeRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Cat"])

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return ensure_not_blank(v)


class CreatePetTypeRequest(PetTypeRequest):
    """Crear un nuevo tipo de mascota."""
    pass


class UpdatePetTypeRequest(PetTypeRequest):
    """Renombrar un tipo de mascota."""
    pass


class PetTypeResponse(CamelModel):
    id: int
    name: str


# ==================== Pets ====================

class PetRequestBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Leo"])
    birth_date: date = Field(..., examples=["2020-09-07"])
    type_id: int = Field(..., ge=ID_MIN, le=ID_MAX, examples=[1])

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return ensure_not_blank(v)

    @field_validator("birth_date")
    @classmethod
    def birth_date_in_past(cls, v: date) -> date:
        return ensure_in_past(v)


class CreatePetRequest(PetRequestBase):
    """Crear una mascota bajo un propietario de la ruta (``/owners/{ownerId}/pets``)."""
    pass


class CreatePetWithOwnerRequest(PetRequestBase):
    """Crear una mascota desde la ruta global; el propietario viene en el cuerpo."""
    owner_id: int = Field(..., ge=ID_MIN, le=ID_MAX, examples=[1])


class UpdatePetRequest(PetRequestBase):
    """Reemplazar nombre, fecha de nacimiento y tipo de una mascota."""
    pass


class VisitSummaryResponse(CamelModel):
    """Resumen de una visita dentro de la respuesta de su mascota."""
    id: int
    date: date
    description: Optional[str] = None


class PetResponse(CamelModel):
    id: int
    name: str
    birth_date: date
    type: PetTypeResponse
    owner_id: int
    visits: List[VisitSummaryResponse] = Field(default_factory=list)
