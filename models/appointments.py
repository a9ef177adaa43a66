from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum

from models.common import CamelModel, ID_MIN, ID_MAX, ensure_not_blank, ensure_in_future


class AppointmentStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class AppointmentRequestBase(CamelModel):
    scheduled_date_time: datetime = Field(..., examples=["2030-03-15T10:30:00"])
    reason: str = Field(..., min_length=1, max_length=255, examples=["Annual checkup"])

    @field_validator("reason")
    @classmethod
    def reason_not_blank(cls, v: str) -> str:
        return ensure_not_blank(v)


class CreateAppointmentRequest(AppointmentRequestBase):
    """
    Agendar una nueva cita.

    La fecha debe estar en el futuro. Si no se indica estado se usa SCHEDULED.
    """
    status: Optional[AppointmentStatus] = None
    pet_id: int = Field(..., ge=ID_MIN, le=ID_MAX, examples=[1])
    vet_id: int = Field(..., ge=ID_MIN, le=ID_MAX, examples=[1])

    @field_validator("scheduled_date_time")
    @classmethod
    def scheduled_in_future(cls, v: datetime) -> datetime:
        return ensure_in_future(v)


class UpdateAppointmentRequest(AppointmentRequestBase):
    """Reemplazar fecha, motivo y estado de una cita existente."""
    status: AppointmentStatus


class AppointmentResponse(CamelModel):
    id: int
    scheduled_date_time: datetime
    reason: str
    status: AppointmentStatus
    pet_id: int
    pet_name: str
    vet_id: int
    vet_first_name: str
    vet_last_name: str
