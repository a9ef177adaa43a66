from .owners import router as owners_router
from .owner_pets import router as owner_pets_router
from .pets import router as pets_router
from .pet_types import router as pet_types_router
from .pet_visits import router as pet_visits_router
from .visits import router as visits_router
from .pet_vaccinations import router as pet_vaccinations_router
from .vets import router as vets_router
from .specialties import router as specialties_router
from .appointments import router as appointments_router

__all__ = [
    "owners_router",
    "owner_pets_router",
    "pets_router",
    "pet_types_router",
    "pet_visits_router",
    "visits_router",
    "pet_vaccinations_router",
    "vets_router",
    "specialties_router",
    "appointments_router",
]
