from fastapi import APIRouter, Depends, status
from typing import List

from models.visits import CreateVisitWithPetRequest, UpdateVisitRequest, VisitResponse
from services.visit_service import VisitService
from dependencies import get_visit_service
from routes.params import IdPath
from config import settings

router = APIRouter(prefix=f"{settings.api_prefix}/visits", tags=["visits"])


@router.get("", response_model=List[VisitResponse])
def list_visits(service: VisitService = Depends(get_visit_service)):
    return service.to_response_list(service.find_all())


@router.post("", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
def create_visit(request: CreateVisitWithPetRequest, service: VisitService = Depends(get_visit_service)):
    """Registra una visita; la mascota (``petId``) viene en el cuerpo."""
    return service.to_response(service.create_with_pet(request))


@router.get("/{visit_id}", response_model=VisitResponse)
def get_visit(visit_id: IdPath, service: VisitService = Depends(get_visit_service)):
    return service.to_response(service.find_by_id(visit_id))


@router.put("/{visit_id}", response_model=VisitResponse)
def update_visit(visit_id: IdPath, request: UpdateVisitRequest, service: VisitService = Depends(get_visit_service)):
    return service.to_response(service.update(visit_id, request))


@router.delete("/{visit_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_visit(visit_id: IdPath, service: VisitService = Depends(get_visit_service)):
    service.delete(visit_id)
