"""
Pet routes (Controllers).

Acceso global a las mascotas; al crear, el propietario viene en el cuerpo.
"""

from fastapi import APIRouter, Depends, status
from typing import List

from models.pets import CreatePetWithOwnerRequest, UpdatePetRequest, PetResponse
from services.pet_service import PetService
from dependencies import get_pet_service
from routes.params import IdPath
from config import settings

router = APIRouter(prefix=f"{settings.api_prefix}/pets", tags=["pets"])


@router.get("", response_model=List[PetResponse])
def list_pets(service: PetService = Depends(get_pet_service)):
    return service.to_response_list(service.find_all())


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
def create_pet(request: CreatePetWithOwnerRequest, service: PetService = Depends(get_pet_service)):
    """
    Crea una mascota.
    
    Se resuelve primero el propietario (``ownerId``) y después el tipo
    (``typeId``); el primero que falte produce el 404.
    """
    return service.to_response(service.create_with_owner(request))


@router.get("/{pet_id}", response_model=PetResponse)
def get_pet(pet_id: IdPath, service: PetService = Depends(get_pet_service)):
    return service.to_response(service.find_by_id(pet_id))


@router.put("/{pet_id}", response_model=PetResponse)
def update_pet(pet_id: IdPath, request: UpdatePetRequest, service: PetService = Depends(get_pet_service)):
    return service.to_response(service.update(pet_id, request))


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet(pet_id: IdPath, service: PetService = Depends(get_pet_service)):
    """Elimina la mascota con sus citas, visitas y vacunas."""
    service.delete(pet_id)
