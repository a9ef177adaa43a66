"""
Tests for OwnerService business rules.

Tests cover:
- create -> find_by_id round trip
- find_by_last_name
- Validation before persisting
- Cascade delete of pets, visits, vaccinations and appointments
"""

import pytest
from sqlalchemy.orm import Session

from database.models import (
    OwnerORM,
    PetORM,
    VisitORM,
    VaccinationORM,
    AppointmentORM,
)
from models.owners import CreateOwnerRequest, UpdateOwnerRequest
from repositories.owner_repository import OwnerRepository
from repositories.pet_repository import PetRepository
from repositories.pet_type_repository import PetTypeRepository
from repositories.visit_repository import VisitRepository
from repositories.vaccination_repository import VaccinationRepository
from repositories.appointment_repository import AppointmentRepository
from services.owner_service import OwnerService
from services.pet_service import PetService
from core.error_codes import ApiErrorCode
from core.exceptions import NotFoundException, ValidationException


@pytest.fixture
def owner_service(db_session: Session) -> OwnerService:
    pet_service = PetService(
        PetRepository(db_session),
        OwnerRepository(db_session),
        PetTypeRepository(db_session),
        VisitRepository(db_session),
        VaccinationRepository(db_session),
        AppointmentRepository(db_session),
    )
    return OwnerService(OwnerRepository(db_session), pet_service)


class TestOwnerServiceCreate:
    
    def test_create_then_find_by_id(self, owner_service: OwnerService):
        request = CreateOwnerRequest(
            first_name="George",
            last_name="Franklin",
            address="110 W. Liberty St.",
            city="Madison",
            telephone="6085551023",
        )
        
        created = owner_service.create(request)
        found = owner_service.find_by_id(created.id)
        
        assert found.first_name == "George"
        assert found.last_name == "Franklin"
        assert found.telephone == "6085551023"
        assert found.email is None
    
    def test_create_rejects_invalid_request(self, owner_service: OwnerService):
        request = CreateOwnerRequest(first_name=" ", last_name="Franklin", telephone="608-555")
        
        with pytest.raises(ValidationException) as exc_info:
            owner_service.create(request)
        
        codes = {v["field"]: v["code"] for v in exc_info.value.violations}
        assert codes == {"firstName": "required", "telephone": "invalid_format"}
        assert owner_service.find_all() == []
    
    def test_create_without_body(self, owner_service: OwnerService):
        with pytest.raises(ValidationException) as exc_info:
            owner_service.create(None)
        
        assert exc_info.value.violations == [
            {"field": None, "code": "body_missing", "message": "Request body is missing"}
        ]


class TestOwnerServiceQueries:
    
    def test_find_by_last_name_none_equals_find_all(
        self,
        owner_service: OwnerService,
        owner: OwnerORM,
        other_owner: OwnerORM
    ):
        assert owner_service.find_by_last_name(None) == owner_service.find_all()
        assert len(owner_service.find_all()) == 2
    
    def test_find_by_last_name(self, owner_service: OwnerService, owner: OwnerORM, other_owner: OwnerORM):
        assert [o.id for o in owner_service.find_by_last_name("Davis")] == [other_owner.id]
        assert owner_service.find_by_last_name("Nobody") == []
    
    def test_find_by_id_missing(self, owner_service: OwnerService):
        with pytest.raises(NotFoundException) as exc_info:
            owner_service.find_by_id(12345)
        
        assert exc_info.value.error == ApiErrorCode.OWNER_NOT_FOUND
    
    def test_response_lists_pets(self, owner_service: OwnerService, owner: OwnerORM, pet: PetORM):
        response = owner_service.to_response(owner)
        
        assert [p.name for p in response.pets] == ["Leo"]
        assert response.pets[0].type_name == "cat"


class TestOwnerServiceUpdate:
    
    def test_update_replaces_every_field(self, owner_service: OwnerService, owner: OwnerORM):
        request = UpdateOwnerRequest(first_name="Georgie", last_name="Franklin", city="Monona")
        
        updated = owner_service.update(owner.id, request)
        
        assert updated.first_name == "Georgie"
        assert updated.city == "Monona"
        # campos omitidos se sobrescriben, no se combinan
        assert updated.address is None
        assert updated.telephone is None
    
    def test_update_missing_owner(self, owner_service: OwnerService):
        request = UpdateOwnerRequest(first_name="Nobody", last_name="Here")
        
        with pytest.raises(NotFoundException):
            owner_service.update(999, request)


class TestOwnerServiceDelete:
    
    def test_delete_cascades(
        self,
        owner_service: OwnerService,
        db_session: Session,
        owner: OwnerORM,
        pet: PetORM,
        other_pet: PetORM,
        visit: VisitORM,
        vaccination: VaccinationORM,
        appointment: AppointmentORM
    ):
        owner_id = owner.id
        other_pet_id = other_pet.id
        
        owner_service.delete(owner_id)
        
        assert db_session.query(OwnerORM).filter(OwnerORM.id == owner_id).count() == 0
        assert [p.id for p in db_session.query(PetORM).all()] == [other_pet_id]
        assert db_session.query(VisitORM).count() == 0
        assert db_session.query(VaccinationORM).count() == 0
        assert db_session.query(AppointmentORM).count() == 0
    
    def test_delete_missing_owner(self, owner_service: OwnerService):
        with pytest.raises(NotFoundException):
            owner_service.delete(999)
