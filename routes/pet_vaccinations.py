"""
Vacunas anidadas: ``/owners/{owner_id}/pets/{pet_id}/vaccinations``.
"""

from fastapi import APIRouter, Depends, status
from typing import List

from models.vaccinations import CreateVaccinationRequest, UpdateVaccinationRequest, VaccinationResponse
from services.pet_service import PetService
from services.vaccination_service import VaccinationService
from dependencies import get_pet_service, get_vaccination_service
from routes.params import IdPath
from config import settings

router = APIRouter(
    prefix=f"{settings.api_prefix}/owners/{{owner_id}}/pets/{{pet_id}}/vaccinations",
    tags=["pet vaccinations"],
)


@router.get("", response_model=List[VaccinationResponse])
def list_pet_vaccinations(
    owner_id: IdPath,
    pet_id: IdPath,
    pet_service: PetService = Depends(get_pet_service),
    service: VaccinationService = Depends(get_vaccination_service),
):
    """Historial de vacunación de la mascota."""
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    return service.to_response_list(service.find_by_pet_id(pet_id))


@router.post("", response_model=VaccinationResponse, status_code=status.HTTP_201_CREATED)
def create_pet_vaccination(
    owner_id: IdPath,
    pet_id: IdPath,
    request: CreateVaccinationRequest,
    pet_service: PetService = Depends(get_pet_service),
    service: VaccinationService = Depends(get_vaccination_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    return service.to_response(service.create(pet_id, request))


@router.get("/{vaccination_id}", response_model=VaccinationResponse)
def get_pet_vaccination(
    owner_id: IdPath,
    pet_id: IdPath,
    vaccination_id: IdPath,
    pet_service: PetService = Depends(get_pet_service),
    service: VaccinationService = Depends(get_vaccination_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    return service.to_response(service.find_by_id_and_pet_id(vaccination_id, pet_id))


@router.put("/{vaccination_id}", response_model=VaccinationResponse)
def update_pet_vaccination(
    owner_id: IdPath,
    pet_id: IdPath,
    vaccination_id: IdPath,
    request: UpdateVaccinationRequest,
    pet_service: PetService = Depends(get_pet_service),
    service: VaccinationService = Depends(get_vaccination_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    service.find_by_id_and_pet_id(vaccination_id, pet_id)
    return service.to_response(service.update(vaccination_id, request))


@router.delete("/{vaccination_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet_vaccination(
    owner_id: IdPath,
    pet_id: IdPath,
    vaccination_id: IdPath,
    pet_service: PetService = Depends(get_pet_service),
    service: VaccinationService = Depends(get_vaccination_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    service.find_by_id_and_pet_id(vaccination_id, pet_id)
    service.delete(vaccination_id)
