from database.models import VisitORM
from models.visits import VisitResponse


def to_visit_response(visit: VisitORM) -> VisitResponse:
    return VisitResponse(
        id=visit.id,
        date=visit.date,
        description=visit.description,
        pet_id=visit.pet_id,
    )
