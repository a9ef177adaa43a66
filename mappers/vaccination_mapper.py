from database.models import VaccinationORM
from models.vaccinations import VaccinationResponse


def to_vaccination_response(vaccination: VaccinationORM) -> VaccinationResponse:
    """Incluye el nombre de la mascota vacunada."""
    return VaccinationResponse(
        id=vaccination.id,
        vaccine_name=vaccination.vaccine_name,
        vaccination_date=vaccination.vaccination_date,
        next_due_date=vaccination.next_due_date,
        pet_id=vaccination.pet_id,
        pet_name=vaccination.pet.name,
    )
