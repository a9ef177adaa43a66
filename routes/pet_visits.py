"""
Visitas anidadas: ``/owners/{owner_id}/pets/{pet_id}/visits``.

Se resuelve la cadena propietario -> mascota -> visita; el primer eslabón
roto determina el 404.
"""

from fastapi import APIRouter, Depends, status
from typing import List

from models.visits import CreateVisitRequest, UpdateVisitRequest, VisitResponse
from services.pet_service import PetService
from services.visit_service import VisitService
from dependencies import get_pet_service, get_visit_service
from routes.params import IdPath
from config import settings

router = APIRouter(
    prefix=f"{settings.api_prefix}/owners/{{owner_id}}/pets/{{pet_id}}/visits",
    tags=["pet visits"],
)


@router.get("", response_model=List[VisitResponse])
def list_pet_visits(
    owner_id: IdPath,
    pet_id: IdPath,
    pet_service: PetService = Depends(get_pet_service),
    service: VisitService = Depends(get_visit_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    return service.to_response_list(service.find_by_pet_id(pet_id))


@router.post("", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
def create_pet_visit(
    owner_id: IdPath,
    pet_id: IdPath,
    request: CreateVisitRequest,
    pet_service: PetService = Depends(get_pet_service),
    service: VisitService = Depends(get_visit_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    return service.to_response(service.create(pet_id, request))


@router.get("/{visit_id}", response_model=VisitResponse)
def get_pet_visit(
    owner_id: IdPath,
    pet_id: IdPath,
    visit_id: IdPath,
    pet_service: PetService = Depends(get_pet_service),
    service: VisitService = Depends(get_visit_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    return service.to_response(service.find_by_id_and_pet_id(visit_id, pet_id))


@router.put("/{visit_id}", response_model=VisitResponse)
def update_pet_visit(
    owner_id: IdPath,
    pet_id: IdPath,
    visit_id: IdPath,
    request: UpdateVisitRequest,
    pet_service: PetService = Depends(get_pet_service),
    service: VisitService = Depends(get_visit_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    service.find_by_id_and_pet_id(visit_id, pet_id)
    return service.to_response(service.update(visit_id, request))


@router.delete("/{visit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pet_visit(
    owner_id: IdPath,
    pet_id: IdPath,
    visit_id: IdPath,
    pet_service: PetService = Depends(get_pet_service),
    service: VisitService = Depends(get_visit_service),
):
    pet_service.find_by_id_and_owner_id(pet_id, owner_id)
    service.find_by_id_and_pet_id(visit_id, pet_id)
    service.delete(visit_id)
