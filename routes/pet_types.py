from fastapi import APIRouter, Depends, status
from typing import List

from models.pets import CreatePetTypeRequest, UpdatePetTypeRequest, PetTypeResponse
from services.pet_type_service import PetTypeService
from dependencies import get_pet_type_service
from routes.params import IdPath
from config import settings

router = APIRouter(prefix=f"{settings.api_prefix}/pet-types", tags=["pet types"])


@router.get("", response_model=List[PetTypeResponse])
def list_pet_types(service: PetTypeService = Depends(get_pet_type_service)):
    return service.to_response_list(service.find_all())


@router.post("", response_model=PetTypeResponse, status_code=status.HTTP_201_CREATED)
def create_pet_type(request: CreatePetTypeRequest, service: PetTypeService = Depends(get_pet_type_service)):
    return service.to_response(service.create(request))


@router.get("/{pet_type_id}", response_model=PetTypeResponse)
def get_pet_type(pet_type_id: IdPath, service: PetTypeService = Depends(get_pet_type_service)):
    return service.to_response(service.find_by_id(pet_type_id))


@router.put("/{pet_type_id}", response_model=PetTypeResponse)
def update_pet_type(
    pet_type_id: IdPath,
    request: UpdatePetTypeRequest,
    service: PetTypeService = Depends(get_pet_type_service),
):
    return service.to_response(service.update(pet_type_id, request))


@router.delete("/{pet_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet_type(pet_type_id: IdPath, service: PetTypeService = Depends(get_pet_type_service)):
    """Devuelve 409 si alguna mascota sigue usando el tipo."""
    service.delete(pet_type_id)
