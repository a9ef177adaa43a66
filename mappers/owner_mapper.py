from typing import Iterable

from database.models import OwnerORM, PetORM
from models.owners import OwnerResponse, PetSummaryResponse


def to_pet_summary(pet: PetORM) -> PetSummaryResponse:
    return PetSummaryResponse(
        id=pet.id,
        name=pet.name,
        birth_date=pet.birth_date,
        type_name=pet.type.name if pet.type else None,
    )


def to_owner_response(owner: OwnerORM, pets: Iterable[PetORM] = ()) -> OwnerResponse:
    """
    Convierte un propietario y sus mascotas en la respuesta de la API.
    
    Args:
        owner: Propietario ORM
        pets: Mascotas del propietario, en el orden en que se deben devolver
        
    Returns:
        OwnerResponse con el resumen de cada mascota
    """
    return OwnerResponse(
        id=owner.id,
        first_name=owner.first_name,
        last_name=owner.last_name,
        address=owner.address,
        city=owner.city,
        telephone=owner.telephone,
        email=owner.email,
        pets=[to_pet_summary(pet) for pet in pets],
    )
