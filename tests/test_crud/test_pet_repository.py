"""
Tests for PetRepository and the child repositories keyed by pet
(VisitRepository, VaccinationRepository).
"""

import pytest
from datetime import date
from sqlalchemy.orm import Session

from database.models import PetORM, PetTypeORM, OwnerORM, VisitORM, VaccinationORM
from repositories.pet_repository import PetRepository
from repositories.visit_repository import VisitRepository
from repositories.vaccination_repository import VaccinationRepository


@pytest.fixture
def pet_repository(db_session: Session) -> PetRepository:
    return PetRepository(db_session)


@pytest.fixture
def visit_repository(db_session: Session) -> VisitRepository:
    return VisitRepository(db_session)


@pytest.fixture
def vaccination_repository(db_session: Session) -> VaccinationRepository:
    return VaccinationRepository(db_session)


class TestPetRepository:
    """Tests for pet queries."""
    
    def test_created_pet_loads_its_type(
        self,
        pet_repository: PetRepository,
        owner: OwnerORM,
        dog_type: PetTypeORM
    ):
        created = pet_repository.create(
            PetORM(name="Rosy", birth_date=date(2021, 4, 17), owner_id=owner.id, type=dog_type)
        )
        pet_repository.commit()
        
        assert created.id is not None
        assert created.type_id == dog_type.id
        assert created.type.name == "dog"
    
    def test_find_by_owner_id(
        self,
        pet_repository: PetRepository,
        pet: PetORM,
        other_pet: PetORM,
        owner: OwnerORM
    ):
        pets = pet_repository.find_by_owner_id(owner.id)
        
        assert [p.name for p in pets] == ["Leo"]
    
    def test_find_by_owner_id_without_pets(self, pet_repository: PetRepository, owner: OwnerORM):
        assert pet_repository.find_by_owner_id(owner.id) == []
    
    def test_count_by_type_id(
        self,
        pet_repository: PetRepository,
        pet: PetORM,
        cat_type: PetTypeORM,
        dog_type: PetTypeORM
    ):
        assert pet_repository.count_by_type_id(cat_type.id) == 1
        assert pet_repository.count_by_type_id(dog_type.id) == 0
    
    def test_delete_by_owner_id(
        self,
        pet_repository: PetRepository,
        pet: PetORM,
        other_pet: PetORM,
        owner: OwnerORM
    ):
        other_pet_id = other_pet.id
        
        deleted = pet_repository.delete_by_owner_id(owner.id)
        pet_repository.commit()
        
        assert deleted == 1
        assert [p.id for p in pet_repository.get_all()] == [other_pet_id]


class TestPetChildRepositories:
    """Tests for visits and vaccinations looked up by pet."""
    
    def test_visits_by_pet(
        self,
        visit_repository: VisitRepository,
        visit: VisitORM,
        pet: PetORM,
        other_pet: PetORM
    ):
        assert [v.description for v in visit_repository.find_by_pet_id(pet.id)] == ["rabies shot"]
        assert visit_repository.find_by_pet_id(other_pet.id) == []
    
    def test_delete_visits_by_pet(self, visit_repository: VisitRepository, visit: VisitORM, pet: PetORM):
        pet_id = pet.id
        
        visit_repository.delete_by_pet_id(pet_id)
        visit_repository.commit()
        
        assert visit_repository.find_by_pet_id(pet_id) == []
    
    def test_vaccinations_by_pet(
        self,
        vaccination_repository: VaccinationRepository,
        vaccination: VaccinationORM,
        pet: PetORM
    ):
        found = vaccination_repository.find_by_pet_id(pet.id)
        
        assert len(found) == 1
        assert found[0].vaccine_name == "Rabies"
        assert found[0].pet.name == "Leo"
    
    def test_delete_vaccinations_by_pet(
        self,
        vaccination_repository: VaccinationRepository,
        vaccination: VaccinationORM,
        pet: PetORM
    ):
        pet_id = pet.id
        
        assert vaccination_repository.delete_by_pet_id(pet_id) == 1
        vaccination_repository.commit()
        
        assert vaccination_repository.find_by_pet_id(pet_id) == []
