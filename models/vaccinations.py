from pydantic import Field, field_validator
from typing import Optional
from datetime import date

from models.common import CamelModel, ensure_not_blank, ensure_in_past


class VaccinationRequest(CamelModel):
    vaccine_name: str = Field(..., min_length=1, max_length=255, examples=["Rabies"])
    vaccination_date: date = Field(..., examples=["2024-01-15"])
    next_due_date: Optional[date] = Field(None, examples=["2025-01-15"])

    @field_validator("vaccine_name")
    @classmethod
    def vaccine_name_not_blank(cls, v: str) -> str:
        return ensure_not_blank(v)

    @field_validator("vaccination_date")
    @classmethod
    def vaccination_date_in_past(cls, v: date) -> date:
        return ensure_in_past(v)


class CreateVaccinationRequest(VaccinationRequest):
    pass


class UpdateVaccinationRequest(VaccinationRequest):
    pass


class VaccinationResponse(CamelModel):
    id: int
    vaccine_name: str
    vaccination_date: date
    next_due_date: Optional[date] = None
    pet_id: int
    pet_name: str
