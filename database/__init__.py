from .db import (
    SessionLocal,
    create_tables,
    engine,
    get_db,
    get_database_url,
    enable_sqlite_foreign_keys,
)
from .models import (
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

__all__ = [
    "SessionLocal",
    "create_tables",
    "engine",
    "get_db",
    "get_database_url",
    "enable_sqlite_foreign_keys",
    "Base",
    "vet_specialties",
    "OwnerORM",
    "PetTypeORM",
    "PetORM",
    "VetORM",
    "SpecialtyORM",
    "VisitORM",
    "VaccinationORM",
    "AppointmentORM",
]
