from pydantic import Field
from typing import List

from models.common import CamelModel, EntityId


# ==================== Specialties ====================

class SpecialtyRequest(CamelModel):
    name: str = Field(..., max_length=255, examples=["radiology"])


class CreateSpecialtyRequest(SpecialtyRequest):
    """Crear una nueva especialidad."""
    pass


class UpdateSpecialtyRequest(SpecialtyRequest):
    """Renombrar una especialidad."""
    pass


class SpecialtyResponse(CamelModel):
    id: int
    name: str


# ==================== Vets ====================

class VetRequest(CamelModel):
    first_name: str = Field(..., max_length=255, examples=["James"])
    last_name: str = Field(..., max_length=255, examples=["Carter"])
    specialty_ids: List[EntityId] = Field(default_factory=list, examples=[[1, 2]])


class CreateVetRequest(VetRequest):
    """Crear un veterinario con sus especialidades."""
    pass


class UpdateVetRequest(VetRequest):
    """Reemplazar nombre y especialidades de un veterinario."""
    pass


class VetResponse(CamelModel):
    """Las especialidades se devuelven ordenadas por id ascendente."""
    id: int
    first_name: str
    last_name: str
    specialties: List[SpecialtyResponse] = Field(default_factory=list)
