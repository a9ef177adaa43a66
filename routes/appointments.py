"""
Appointment routes (Controllers).

Además del CRUD, las citas se pueden cancelar o completar con PATCH.
"""

from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from models.appointments import CreateAppointmentRequest, UpdateAppointmentRequest, AppointmentResponse
from services.appointment_service import AppointmentService
from dependencies import get_appointment_service
from models.common import ID_MIN, ID_MAX
from routes.params import IdPath
from config import settings

router = APIRouter(prefix=f"{settings.api_prefix}/appointments", tags=["appointments"])


@router.get("", response_model=List[AppointmentResponse])
def list_appointments(
    pet_id: Optional[int] = Query(None, alias="petId", ge=ID_MIN, le=ID_MAX, description="Filtrar por mascota"),
    vet_id: Optional[int] = Query(None, alias="vetId", ge=ID_MIN, le=ID_MAX, description="Filtrar por veterinario"),
    service: AppointmentService = Depends(get_appointment_service),
):
    """
    Lista citas, opcionalmente filtradas por mascota y/o veterinario.
    
    Args:
        pet_id: ID de la mascota (404 si no existe)
        vet_id: ID del veterinario (404 si no existe)
        service: Injected AppointmentService
    """
    return service.to_response_list(service.find_filtered(pet_id=pet_id, vet_id=vet_id))


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
def create_appointment(
    request: CreateAppointmentRequest,
    service: AppointmentService = Depends(get_appointment_service),
):
    """Agenda una cita futura; sin ``status`` queda como SCHEDULED."""
    return service.to_response(service.create(request))


@router.get("/{appointment_id}", response_model=AppointmentResponse)
def get_appointment(appointment_id: IdPath, service: AppointmentService = Depends(get_appointment_service)):
    return service.to_response(service.find_by_id(appointment_id))


@router.put("/{appointment_id}", response_model=AppointmentResponse)
def update_appointment(
    appointment_id: IdPath,
    request: UpdateAppointmentRequest,
    service: AppointmentService = Depends(get_appointment_service),
):
    return service.to_response(service.update(appointment_id, request))


@router.patch("/{appointment_id}/cancel", response_model=AppointmentResponse)
def cancel_appointment(appointment_id: IdPath, service: AppointmentService = Depends(get_appointment_service)):
    return service.to_response(service.cancel(appointment_id))


@router.patch("/{appointment_id}/complete", response_model=AppointmentResponse)
def complete_appointment(appointment_id: IdPath, service: AppointmentService = Depends(get_appointment_service)):
    return service.to_response(service.complete(appointment_id))


@router.delete("/{appointment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_appointment(appointment_id: IdPath, service: AppointmentService = Depends(get_appointment_service)):
    service.delete(appointment_id)
