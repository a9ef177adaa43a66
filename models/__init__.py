from .owners import (
    CreateOwnerRequest,
    UpdateOwnerRequest,
    OwnerResponse,
    PetSummaryResponse,
)
from .pets import (
    CreatePetTypeRequest,
    UpdatePetTypeRequest,
    PetTypeResponse,
    CreatePetRequest,
    CreatePetWithOwnerRequest,
    UpdatePetRequest,
    PetResponse,
    VisitSummaryResponse,
)
from .vets import (
    CreateSpecialtyRequest,
    UpdateSpecialtyRequest,
    SpecialtyResponse,
    CreateVetRequest,
    UpdateVetRequest,
    VetResponse,
)
from .visits import CreateVisitRequest, CreateVisitWithPetRequest, UpdateVisitRequest, VisitResponse
from .vaccinations import CreateVaccinationRequest, UpdateVaccinationRequest, VaccinationResponse
from .appointments import (
    AppointmentStatus,
    CreateAppointmentRequest,
    UpdateAppointmentRequest,
    AppointmentResponse,
)
from .common import (
    CamelModel,
    ErrorResponse,
    FieldViolation,
    HealthCheckResponse,
    create_error_response,
)

__all__ = [
    # Owners
    "CreateOwnerRequest",
    "UpdateOwnerRequest",
    "OwnerResponse",
    "PetSummaryResponse",
    # Pets / pet types
    "CreatePetTypeRequest",
    "UpdatePetTypeRequest",
    "PetTypeResponse",
    "CreatePetRequest",
    "CreatePetWithOwnerRequest",
    "UpdatePetRequest",
    "PetResponse",
    "VisitSummaryResponse",
    # Vets / specialties
    "CreateSpecialtyRequest",
    "UpdateSpecialtyRequest",
    "SpecialtyResponse",
    "CreateVetRequest",
    "UpdateVetRequest",
    "VetResponse",
    # Visits
    "CreateVisitRequest",
    "CreateVisitWithPetRequest",
    "UpdateVisitRequest",
    "VisitResponse",
    # Vaccinations
    "CreateVaccinationRequest",
    "UpdateVaccinationRequest",
    "VaccinationResponse",
    # Appointments
    "AppointmentStatus",
    "CreateAppointmentRequest",
    "UpdateAppointmentRequest",
    "AppointmentResponse",
    # Common
    "CamelModel",
    "ErrorResponse",
    "FieldViolation",
    "HealthCheckResponse",
    "create_error_response",
]
