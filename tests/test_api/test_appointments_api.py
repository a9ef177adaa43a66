"""
Pruebas para endpoints de la API de Citas.

Las pruebas cubren:
- Agendar citas (estado por defecto, fecha futura)
- Listado con filtros por mascota y veterinario
- Modificar, cancelar, completar y eliminar
"""

import pytest
from fastapi.testclient import TestClient
from datetime import datetime, timedelta

from database.models import AppointmentORM, PetORM, VetORM
from tests.conftest import API, assert_error_body, violation_codes, future_datetime


class TestAppointmentCreation:
    
    def test_create_defaults_to_scheduled(self, client: TestClient, pet: PetORM, vet: VetORM):
        when = future_datetime()
        
        response = client.post(f"{API}/appointments", json={
            "scheduledDateTime": when.isoformat(),
            "reason": "Annual checkup",
            "petId": pet.id,
            "vetId": vet.id,
        })
        
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "SCHEDULED"
        assert data["petName"] == "Leo"
        assert data["vetFirstName"] == "James"
        assert data["vetLastName"] == "Carter"
        assert datetime.fromisoformat(data["scheduledDateTime"]) == when
    
    def test_past_date_is_rejected(self, client: TestClient, pet: PetORM, vet: VetORM):
        yesterday = (datetime.now() - timedelta(days=1)).isoformat()
        
        response = client.post(f"{API}/appointments", json={
            "scheduledDateTime": yesterday,
            "reason": "",
            "petId": pet.id,
            "vetId": vet.id,
        })
        
        body = assert_error_body(response, 400, "ERR-0010")
        assert violation_codes(body) == {"scheduledDateTime": "not_in_future", "reason": "required"}
    
    def test_unknown_status_is_rejected(self, client: TestClient, pet: PetORM, vet: VetORM):
        response = client.post(f"{API}/appointments", json={
            "scheduledDateTime": future_datetime().isoformat(),
            "reason": "Checkup",
            "status": "POSTPONED",
            "petId": pet.id,
            "vetId": vet.id,
        })
        
        body = assert_error_body(response, 400, "ERR-0010")
        assert violation_codes(body) == {"status": "invalid_format"}
    
    def test_missing_vet(self, client: TestClient, pet: PetORM):
        response = client.post(f"{API}/appointments", json={
            "scheduledDateTime": future_datetime().isoformat(),
            "reason": "Checkup",
            "petId": pet.id,
            "vetId": 999,
        })
        
        assert_error_body(response, 404, "ERR-0005")


class TestAppointmentQueries:
    
    def test_filters(self, client: TestClient, appointment: AppointmentORM, pet: PetORM, vet: VetORM, other_pet: PetORM):
        assert len(client.get(f"{API}/appointments").json()) == 1
        assert len(client.get(f"{API}/appointments", params={"petId": pet.id}).json()) == 1
        assert len(client.get(f"{API}/appointments", params={"vetId": vet.id}).json()) == 1
        assert client.get(f"{API}/appointments", params={"petId": other_pet.id}).json() == []
    
    def test_filter_by_missing_parent(self, client: TestClient):
        assert_error_body(client.get(f"{API}/appointments", params={"petId": 999}), 404, "ERR-0003")
        assert_error_body(client.get(f"{API}/appointments", params={"vetId": 999}), 404, "ERR-0005")
    
    def test_get_missing(self, client: TestClient):
        assert_error_body(client.get(f"{API}/appointments/999"), 404, "ERR-0009")


class TestAppointmentChanges:
    
    def test_update_requires_status(self, client: TestClient, appointment: AppointmentORM):
        response = client.put(f"{API}/appointments/{appointment.id}", json={
            "scheduledDateTime": future_datetime(days=7).isoformat(),
            "reason": "Dental cleaning",
        })
        
        body = assert_error_body(response, 400, "ERR-0010")
        assert violation_codes(body) == {"status": "required"}
    
    def test_update(self, client: TestClient, appointment: AppointmentORM):
        response = client.put(f"{API}/appointments/{appointment.id}", json={
            "scheduledDateTime": future_datetime(days=7).isoformat(),
            "reason": "Dental cleaning",
            "status": "CONFIRMED",
        })
        
        assert response.status_code == 200
        assert response.json()["status"] == "CONFIRMED"
        assert response.json()["reason"] == "Dental cleaning"
    
    def test_update_accepts_past_date(self, client: TestClient, appointment: AppointmentORM):
        response = client.put(f"{API}/appointments/{appointment.id}", json={
            "scheduledDateTime": "2024-01-10T09:00:00",
            "reason": "Annual checkup",
            "status": "COMPLETED",
        })
        
        assert response.status_code == 200
        assert datetime.fromisoformat(response.json()["scheduledDateTime"]) == datetime(2024, 1, 10, 9, 0)
        assert response.json()["status"] == "COMPLETED"
    
    def test_cancel_then_complete(self, client: TestClient, appointment: AppointmentORM):
        cancelled = client.patch(f"{API}/appointments/{appointment.id}/cancel")
        assert cancelled.status_code == 200
        assert cancelled.json()["status"] == "CANCELLED"
        
        completed = client.patch(f"{API}/appointments/{appointment.id}/complete")
        assert completed.status_code == 200
        assert completed.json()["status"] == "COMPLETED"
    
    def test_cancel_missing(self, client: TestClient):
        assert_error_body(client.patch(f"{API}/appointments/999/cancel"), 404, "ERR-0009")
    
    def test_delete(self, client: TestClient, appointment: AppointmentORM):
        appointment_id = appointment.id
        
        assert client.delete(f"{API}/appointments/{appointment_id}").status_code == 204
        assert client.get(f"{API}/appointments/{appointment_id}").status_code == 404
