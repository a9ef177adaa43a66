"""
Vet routes (Controllers).
"""

from fastapi import APIRouter, Depends, status
from typing import List

from models.vets import CreateVetRequest, UpdateVetRequest, VetResponse
from services.vet_service import VetService
from dependencies import get_vet_service
from routes.params import IdPath
from config import settings

router = APIRouter(prefix=f"{settings.api_prefix}/vets", tags=["vets"])


@router.get("", response_model=List[VetResponse])
def list_vets(service: VetService = Depends(get_vet_service)):
    return service.to_response_list(service.find_all())


@router.post("", response_model=VetResponse, status_code=status.HTTP_201_CREATED)
def create_vet(request: CreateVetRequest, service: VetService = Depends(get_vet_service)):
    """
    Crea un veterinario.
    
    Todas las especialidades de ``specialtyIds`` deben existir; la primera
    que falte produce un 404 y no se guarda nada.
    """
    return service.to_response(service.create(request))


@router.get("/{vet_id}", response_model=VetResponse)
def get_vet(vet_id: IdPath, service: VetService = Depends(get_vet_service)):
    return service.to_response(service.find_by_id(vet_id))


@router.put("/{vet_id}", response_model=VetResponse)
def update_vet(vet_id: IdPath, request: UpdateVetRequest, service: VetService = Depends(get_vet_service)):
    """Reemplaza nombre y conjunto completo de especialidades."""
    return service.to_response(service.update(vet_id, request))


@router.delete("/{vet_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_vet(vet_id: IdPath, service: VetService = Depends(get_vet_service)):
    service.delete(vet_id)
