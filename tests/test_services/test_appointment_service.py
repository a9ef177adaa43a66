"""
Tests for AppointmentService business rules.

Tests cover:
- Default status on create
- cancel / complete overwrite any status
- Lookups by pet and vet, with parent checks
"""

import pytest
from sqlalchemy.orm import Session

from database.models import AppointmentORM, PetORM, VetORM
from models.appointments import AppointmentStatus, CreateAppointmentRequest, UpdateAppointmentRequest
from repositories.appointment_repository import AppointmentRepository
from repositories.pet_repository import PetRepository
from repositories.vet_repository import VetRepository
from services.appointment_service import AppointmentService
from core.error_codes import ApiErrorCode
from core.exceptions import NotFoundException
from tests.conftest import future_datetime


@pytest.fixture
def appointment_service(db_session: Session) -> AppointmentService:
    return AppointmentService(
        AppointmentRepository(db_session),
        PetRepository(db_session),
        VetRepository(db_session),
    )


class TestAppointmentServiceCreate:
    
    def test_create_defaults_to_scheduled(self, appointment_service: AppointmentService, pet: PetORM, vet: VetORM):
        request = CreateAppointmentRequest(
            scheduled_date_time=future_datetime(),
            reason="Vaccination",
            pet_id=pet.id,
            vet_id=vet.id,
        )
        
        created = appointment_service.create(request)
        response = appointment_service.to_response(appointment_service.find_by_id(created.id))
        
        assert response.status == AppointmentStatus.SCHEDULED
        assert response.pet_name == "Leo"
        assert response.vet_first_name == "James"
        assert response.vet_last_name == "Carter"
    
    def test_create_with_explicit_status(self, appointment_service: AppointmentService, pet: PetORM, vet: VetORM):
        request = CreateAppointmentRequest(
            scheduled_date_time=future_datetime(),
            reason="Follow-up",
            status=AppointmentStatus.CONFIRMED,
            pet_id=pet.id,
            vet_id=vet.id,
        )
        
        assert appointment_service.create(request).status == "CONFIRMED"
    
    def test_pet_is_resolved_before_vet(self, appointment_service: AppointmentService):
        request = CreateAppointmentRequest(
            scheduled_date_time=future_datetime(),
            reason="Checkup",
            pet_id=404,
            vet_id=404,
        )
        
        with pytest.raises(NotFoundException) as exc_info:
            appointment_service.create(request)
        
        assert exc_info.value.error == ApiErrorCode.PET_NOT_FOUND
    
    def test_missing_vet(self, appointment_service: AppointmentService, pet: PetORM):
        request = CreateAppointmentRequest(
            scheduled_date_time=future_datetime(),
            reason="Checkup",
            pet_id=pet.id,
            vet_id=404,
        )
        
        with pytest.raises(NotFoundException) as exc_info:
            appointment_service.create(request)
        
        assert exc_info.value.error == ApiErrorCode.VET_NOT_FOUND


class TestAppointmentServiceStatus:
    
    def test_cancel(self, appointment_service: AppointmentService, appointment: AppointmentORM):
        assert appointment_service.cancel(appointment.id).status == "CANCELLED"
    
    def test_complete_after_cancel(self, appointment_service: AppointmentService, appointment: AppointmentORM):
        appointment_service.cancel(appointment.id)
        
        assert appointment_service.complete(appointment.id).status == "COMPLETED"
    
    def test_cancel_after_complete(self, appointment_service: AppointmentService, appointment: AppointmentORM):
        appointment_service.complete(appointment.id)
        
        assert appointment_service.cancel(appointment.id).status == "CANCELLED"
    
    def test_cancel_missing(self, appointment_service: AppointmentService):
        with pytest.raises(NotFoundException) as exc_info:
            appointment_service.cancel(999)
        
        assert exc_info.value.error == ApiErrorCode.APPOINTMENT_NOT_FOUND
    
    def test_update_overwrites_fields(self, appointment_service: AppointmentService, appointment: AppointmentORM):
        new_time = future_datetime(days=10)
        request = UpdateAppointmentRequest(
            scheduled_date_time=new_time,
            reason="Dental cleaning",
            status=AppointmentStatus.CONFIRMED,
        )
        
        updated = appointment_service.update(appointment.id, request)
        
        assert updated.scheduled_date_time == new_time
        assert updated.reason == "Dental cleaning"
        assert updated.status == "CONFIRMED"


class TestAppointmentServiceQueries:
    
    def test_filters(self, appointment_service: AppointmentService, appointment: AppointmentORM, pet: PetORM, vet: VetORM):
        assert [a.id for a in appointment_service.find_filtered()] == [appointment.id]
        assert [a.id for a in appointment_service.find_filtered(pet_id=pet.id)] == [appointment.id]
        assert [a.id for a in appointment_service.find_filtered(vet_id=vet.id)] == [appointment.id]
        assert [a.id for a in appointment_service.find_filtered(pet_id=pet.id, vet_id=vet.id)] == [appointment.id]
    
    def test_filter_by_other_pet_is_empty(
        self,
        appointment_service: AppointmentService,
        appointment: AppointmentORM,
        other_pet: PetORM
    ):
        assert appointment_service.find_by_pet_id(other_pet.id) == []
    
    def test_filter_by_missing_parent(self, appointment_service: AppointmentService):
        with pytest.raises(NotFoundException) as pet_missing:
            appointment_service.find_by_pet_id(999)
        with pytest.raises(NotFoundException) as vet_missing:
            appointment_service.find_by_vet_id(999)
        
        assert pet_missing.value.error == ApiErrorCode.PET_NOT_FOUND
        assert vet_missing.value.error == ApiErrorCode.VET_NOT_FOUND
