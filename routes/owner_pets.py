"""
Mascotas anidadas bajo su propietario: ``/owners/{owner_id}/pets``.

Cada operación comprueba primero la cadena propietario -> mascota; una mascota
de otro propietario responde igual que una inexistente.
"""

from fastapi import APIRouter, Depends, status
from typing import List

from models.pets import CreatePetRequest, UpdatePetRequest, PetResponse
from services.pet_service import PetService
from dependencies import get_pet_service
from routes.params import IdPath
from config import settings

router = APIRouter(prefix=f"{settings.api_prefix}/owners/{{owner_id}}/pets", tags=["owner pets"])


@router.get("", response_model=List[PetResponse])
def list_owner_pets(owner_id: IdPath, service: PetService = Depends(get_pet_service)):
    return service.to_response_list(service.find_by_owner_id(owner_id))


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
def create_owner_pet(
    owner_id: IdPath,
    request: CreatePetRequest,
    service: PetService = Depends(get_pet_service),
):
    """Crea una mascota para el propietario de la ruta."""
    return service.to_response(service.create(owner_id, request))


@router.get("/{pet_id}", response_model=PetResponse)
def get_owner_pet(owner_id: IdPath, pet_id: IdPath, service: PetService = Depends(get_pet_service)):
    return service.to_response(service.find_by_id_and_owner_id(pet_id, owner_id))


@router.put("/{pet_id}", response_model=PetResponse)
def update_owner_pet(
    owner_id: IdPath,
    pet_id: IdPath,
    request: UpdatePetRequest,
    service: PetService = Depends(get_pet_service),
):
    service.find_by_id_and_owner_id(pet_id, owner_id)
    return service.to_response(service.update(pet_id, request))


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_owner_pet(owner_id: IdPath, pet_id: IdPath, service: PetService = Depends(get_pet_service)):
    service.find_by_id_and_owner_id(pet_id, owner_id)
    service.delete(pet_id)
