from typing import Iterable

from database.models import PetORM, PetTypeORM, VisitORM
from models.pets import PetResponse, PetTypeResponse, VisitSummaryResponse


def to_pet_type_response(pet_type: PetTypeORM) -> PetTypeResponse:
    return PetTypeResponse(id=pet_type.id, name=pet_type.name)


def to_visit_summary(visit: VisitORM) -> VisitSummaryResponse:
    return VisitSummaryResponse(id=visit.id, date=visit.date, description=visit.description)


def to_pet_response(pet: PetORM, visits: Iterable[VisitORM] = ()) -> PetResponse:
    """Mascota con su tipo embebido y el resumen de sus visitas."""
    return PetResponse(
        id=pet.id,
        name=pet.name,
        birth_date=pet.birth_date,
        type=to_pet_type_response(pet.type),
        owner_id=pet.owner_id,
        visits=[to_visit_summary(visit) for visit in visits],
    )
