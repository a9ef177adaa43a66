from database.models import AppointmentORM
from models.appointments import AppointmentResponse, AppointmentStatus


def to_appointment_response(appointment: AppointmentORM) -> AppointmentResponse:
    """
    Convierte una cita en la respuesta de la API.
    
    Desnormaliza el nombre de la mascota y el nombre completo del veterinario
    para que el cliente no tenga que pedirlos por separado.
    """
    return AppointmentResponse(
        id=appointment.id,
        scheduled_date_time=appointment.scheduled_date_time,
        reason=appointment.reason,
        status=AppointmentStatus(appointment.status),
        pet_id=appointment.pet_id,
        pet_name=appointment.pet.name,
        vet_id=appointment.vet_id,
        vet_first_name=appointment.vet.first_name,
        vet_last_name=appointment.vet.last_name,
    )
