import datetime

from pydantic import Field, field_validator
from typing import Optional

from models.common import CamelModel, ID_MIN, ID_MAX, ensure_not_blank


class VisitRequestBase(CamelModel):
    date: datetime.date = Field(..., examples=["2024-01-15"])
    description: str = Field(..., min_length=1, max_length=255, examples=["Annual checkup"])

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v: str) -> str:
        return ensure_not_blank(v)


class CreateVisitRequest(VisitRequestBase):
    """Registrar una visita para la mascota de la ruta."""
    pass


class CreateVisitWithPetRequest(VisitRequestBase):
    """Registrar una visita desde la ruta global; la mascota viene en el cuerpo."""
    pet_id: int = Field(..., ge=ID_MIN, le=ID_MAX, examples=[1])


class UpdateVisitRequest(VisitRequestBase):
    """Reemplazar fecha y descripción de una visita."""
    pass


class VisitResponse(CamelModel):
    id: int
    date: datetime.date
    description: Optional[str] = None
    pet_id: int
