from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Date, Table
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


#tabla de enlace: veterinarios <-> especialidades
vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", Integer, ForeignKey("vets.id", ondelete="CASCADE"), primary_key=True),
    Column("specialty_id", Integer, ForeignKey("specialties.id", ondelete="CASCADE"), primary_key=True),
)


#ORM: Owners
class OwnerORM(Base):
    __tablename__ = "owners"
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False, index=True)
    address = Column(String(255))
    city = Column(String(255))
    telephone = Column(String(255))
    email = Column(String(255))


#ORM: Pet types
class PetTypeORM(Base):
    __tablename__ = "pet_types"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)


#ORM: Pets
class PetORM(Base):
    __tablename__ = "pets"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    birth_date = Column(Date, nullable=False)
    type_id = Column(Integer, ForeignKey("pet_types.id"), nullable=False)
    owner_id = Column(Integer, ForeignKey("owners.id", ondelete="CASCADE"), nullable=False, index=True)

    #solo relaciones muchos-a-uno; los hijos se consultan por repositorio
    type = relationship("PetTypeORM", lazy="joined")


#ORM: Vets
class VetORM(Base):
    __tablename__ = "vets"
    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)


#ORM: Specialties
class SpecialtyORM(Base):
    __tablename__ = "specialties"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)


#ORM: Visits
class VisitORM(Base):
    __tablename__ = "visits"
    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False)
    description = Column(String(255))
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True)


#ORM: Vaccinations
class VaccinationORM(Base):
    __tablename__ = "vaccinations"
    id = Column(Integer, primary_key=True, autoincrement=True)
    vaccine_name = Column(String(255), nullable=False)
    vaccination_date = Column(Date, nullable=False)
    next_due_date = Column(Date, nullable=True)
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True)

    pet = relationship("PetORM", lazy="joined")


#ORM: Appointments
class AppointmentORM(Base):
    __tablename__ = "appointments"
    id = Column(Integer, primary_key=True, autoincrement=True)
    scheduled_date_time = Column(DateTime, nullable=False)
    reason = Column(String(255), nullable=False)
    status = Column(String(20), nullable=False, default="SCHEDULED")
    pet_id = Column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True)
    vet_id = Column(Integer, ForeignKey("vets.id", ondelete="CASCADE"), nullable=False, index=True)

    pet = relationship("PetORM", lazy="joined")
    vet = relationship("VetORM", lazy="joined")


__all__ = [
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
