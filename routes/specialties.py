from fastapi import APIRouter, Depends, status
from typing import List

from models.vets import CreateSpecialtyRequest, UpdateSpecialtyRequest, SpecialtyResponse
from services.specialty_service import SpecialtyService
from dependencies import get_specialty_service
from routes.params import IdPath
from config import settings

router = APIRouter(prefix=f"{settings.api_prefix}/specialties", tags=["specialties"])


@router.get("", response_model=List[SpecialtyResponse])
def list_specialties(service: SpecialtyService = Depends(get_specialty_service)):
    return service.to_response_list(service.find_all())


@router.post("", response_model=SpecialtyResponse, status_code=status.HTTP_201_CREATED)
def create_specialty(request: CreateSpecialtyRequest, service: SpecialtyService = Depends(get_specialty_service)):
    return service.to_response(service.create(request))


@router.get("/{specialty_id}", response_model=SpecialtyResponse)
def get_specialty(specialty_id: IdPath, service: SpecialtyService = Depends(get_specialty_service)):
    return service.to_response(service.find_by_id(specialty_id))


@router.put("/{specialty_id}", response_model=SpecialtyResponse)
def update_specialty(
    specialty_id: IdPath,
    request: UpdateSpecialtyRequest,
    service: SpecialtyService = Depends(get_specialty_service),
):
    return service.to_response(service.update(specialty_id, request))


@router.delete("/{specialty_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_specialty(specialty_id: IdPath, service: SpecialtyService = Depends(get_specialty_service)):
    service.delete(specialty_id)
