"""
Configuración de fixtures para pytest.

Este módulo contiene fixtures reutilizables para todos los tests.
"""

import pytest
import os
from typing import Generator, Dict, Any, List
from datetime import datetime, date, timedelta
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Configurar para usar base de datos en memoria para tests
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from main import app
from database.db import get_db
from database.models import (
    Base,
    vet_specialties,
    OwnerORM,
    PetTypeORM,
    PetORM,
    VetORM,
    SpecialtyORM,
    VisitORM,
    VaccinationORM,
    AppointmentORM,
)
from config import settings

API = settings.api_prefix


# ==================== Database Fixtures ====================

@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    
    # Enable foreign keys for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
    
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a new database session for a test."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass
    
    app.dependency_overrides[get_db] = override_get_db
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()


def _persist(db_session: Session, entity):
    db_session.add(entity)
    db_session.commit()
    db_session.refresh(entity)
    return entity


# ==================== Owner Fixtures ====================

@pytest.fixture
def owner_data() -> Dict[str, Any]:
    """Sample owner data for testing."""
    return {
        "firstName": "George",
        "lastName": "Franklin",
        "address": "110 W. Liberty St.",
        "city": "Madison",
        "telephone": "6085551023",
    }


@pytest.fixture
def owner(db_session: Session) -> OwnerORM:
    """Create George Franklin in the database."""
    return _persist(db_session, OwnerORM(
        first_name="George",
        last_name="Franklin",
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    ))


@pytest.fixture
def other_owner(db_session: Session) -> OwnerORM:
    """A second owner, used to test ownership checks."""
    return _persist(db_session, OwnerORM(
        first_name="Betty",
        last_name="Davis",
        address="638 Cardinal Ave.",
        city="Sun Prairie",
        telephone="6085551749",
    ))


# ==================== Pet Fixtures ====================

@pytest.fixture
def cat_type(db_session: Session) -> PetTypeORM:
    return _persist(db_session, PetTypeORM(name="cat"))


@pytest.fixture
def dog_type(db_session: Session) -> PetTypeORM:
    return _persist(db_session, PetTypeORM(name="dog"))


@pytest.fixture
def pet(db_session: Session, owner: OwnerORM, cat_type: PetTypeORM) -> PetORM:
    """Leo, the cat of George Franklin."""
    return _persist(db_session, PetORM(
        name="Leo",
        birth_date=date(2020, 9, 7),
        owner_id=owner.id,
        type_id=cat_type.id,
    ))


@pytest.fixture
def other_pet(db_session: Session, other_owner: OwnerORM, dog_type: PetTypeORM) -> PetORM:
    """Basil, owned by Betty Davis."""
    return _persist(db_session, PetORM(
        name="Basil",
        birth_date=date(2019, 8, 6),
        owner_id=other_owner.id,
        type_id=dog_type.id,
    ))


# ==================== Vet Fixtures ====================

@pytest.fixture
def specialties(db_session: Session) -> List[SpecialtyORM]:
    """radiology, surgery, dentistry (in id order)."""
    result = []
    for name in ("radiology", "surgery", "dentistry"):
        result.append(_persist(db_session, SpecialtyORM(name=name)))
    return result


@pytest.fixture
def vet(db_session: Session) -> VetORM:
    return _persist(db_session, VetORM(first_name="James", last_name="Carter"))


@pytest.fixture
def vet_with_specialties(db_session: Session, specialties: List[SpecialtyORM]) -> VetORM:
    """Helen Leary, linked to surgery and radiology."""
    helen = _persist(db_session, VetORM(first_name="Helen", last_name="Leary"))
    db_session.execute(vet_specialties.insert(), [
        {"vet_id": helen.id, "specialty_id": specialties[1].id},
        {"vet_id": helen.id, "specialty_id": specialties[0].id},
    ])
    db_session.commit()
    return helen


# ==================== Visit / Vaccination / Appointment Fixtures ====================

@pytest.fixture
def visit(db_session: Session, pet: PetORM) -> VisitORM:
    return _persist(db_session, VisitORM(
        date=date(2024, 1, 15),
        description="rabies shot",
        pet_id=pet.id,
    ))


@pytest.fixture
def vaccination(db_session: Session, pet: PetORM) -> VaccinationORM:
    return _persist(db_session, VaccinationORM(
        vaccine_name="Rabies",
        vaccination_date=date(2024, 1, 15),
        next_due_date=date(2025, 1, 15),
        pet_id=pet.id,
    ))


def future_datetime(days: int = 5) -> datetime:
    """Fecha y hora futura sin zona horaria, a las 10:30."""
    return (datetime.now() + timedelta(days=days)).replace(hour=10, minute=30, second=0, microsecond=0)


@pytest.fixture
def appointment(db_session: Session, pet: PetORM, vet: VetORM) -> AppointmentORM:
    return _persist(db_session, AppointmentORM(
        scheduled_date_time=future_datetime(),
        reason="Annual checkup",
        status="SCHEDULED",
        pet_id=pet.id,
        vet_id=vet.id,
    ))


# ==================== Utility Functions ====================

def assert_error_body(response, status_code: int, error_code: str) -> Dict[str, Any]:
    """Comprueba el cuerpo de error estándar y lo devuelve."""
    assert response.status_code == status_code
    body = response.json()
    assert body["errorCode"] == error_code
    assert body["method"] == response.request.method
    assert body["uri"] == response.request.url.path
    assert "reason" in body
    assert isinstance(body["errors"], list)
    return body


def violation_codes(body: Dict[str, Any]) -> Dict[str, str]:
    """Mapa campo -> código de las violaciones de un cuerpo de error."""
    return {violation["field"]: violation["code"] for violation in body["errors"]}
