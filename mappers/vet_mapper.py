from typing import Iterable

from database.models import SpecialtyORM, VetORM
from models.vets import SpecialtyResponse, VetResponse


def to_specialty_response(specialty: SpecialtyORM) -> SpecialtyResponse:
    return SpecialtyResponse(id=specialty.id, name=specialty.name)


def to_vet_response(vet: VetORM, specialties: Iterable[SpecialtyORM] = ()) -> VetResponse:
    """Las especialidades se ordenan por id para que la respuesta sea estable."""
    ordered = sorted(specialties, key=lambda specialty: specialty.id)
    return VetResponse(
        id=vet.id,
        first_name=vet.first_name,
        last_name=vet.last_name,
        specialties=[to_specialty_response(specialty) for specialty in ordered],
    )
