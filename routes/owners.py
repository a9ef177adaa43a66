"""
Owner routes (Controllers) - Layered Architecture.

This module handles HTTP requests/responses for owner endpoints.
All business logic is delegated to the OwnerService layer; errors raised
there are turned into responses by the handlers in ``core.error_handlers``.
"""

from fastapi import APIRouter, Body, Depends, Query, status
from typing import List, Optional
import logging

from models.owners import CreateOwnerRequest, UpdateOwnerRequest, OwnerResponse
from services.owner_service import OwnerService
from dependencies import get_owner_service
from routes.params import IdPath
from config import settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{settings.api_prefix}/owners", tags=["owners"])


@router.get("", response_model=List[OwnerResponse])
def list_owners(
    last_name: Optional[str] = Query(None, alias="lastName", description="Apellido exacto del propietario"),
    service: OwnerService = Depends(get_owner_service),
):
    """
    Lista propietarios, opcionalmente filtrados por apellido.
    
    Args:
        last_name: Apellido exacto (sensible a mayúsculas); sin él se listan todos
        service: Injected OwnerService
        
    Returns:
        Propietarios con el resumen de sus mascotas
    """
    return service.to_response_list(service.find_by_last_name(last_name))


@router.post("", response_model=OwnerResponse, status_code=status.HTTP_201_CREATED)
def create_owner(
    request: Optional[CreateOwnerRequest] = Body(None),
    service: OwnerService = Depends(get_owner_service),
):
    """
    Crea un propietario.
    
    El cuerpo se valida completo y todas las violaciones se devuelven juntas
    en un 400.
    """
    return service.to_response(service.create(request))


@router.get("/{owner_id}", response_model=OwnerResponse)
def get_owner(owner_id: IdPath, service: OwnerService = Depends(get_owner_service)):
    return service.to_response(service.find_by_id(owner_id))


@router.put("/{owner_id}", response_model=OwnerResponse)
def update_owner(
    owner_id: IdPath,
    request: Optional[UpdateOwnerRequest] = Body(None),
    service: OwnerService = Depends(get_owner_service),
):
    """Reemplaza todos los datos del propietario."""
    return service.to_response(service.update(owner_id, request))


@router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_owner(owner_id: IdPath, service: OwnerService = Depends(get_owner_service)):
    """
    Elimina el propietario junto con sus mascotas y, de cada mascota,
    sus citas, visitas y vacunas.
    """
    service.delete(owner_id)
