from sqlalchemy import Column, Date, Integer, String

from zoo.database import Base


class Animal(Base):
    __tablename__ = 'animals'
    AnimalID = Column(Integer, primary_key=True, index=True)
    Name = Column(String(100), nullable=False)
    Species = Column(String(100), nullable=False)
    DateOfBirth = Column(Date, nullable=False)
    Gender = Column(String(20), nullable=False)
    HealthStatus = Column(String(50), nullable=False, index=True)
    LastVetCheckup = Column(Date, nullable=False)
    # enclosures live in their own table, owned by another service
    EnclosureID = Column(Integer, nullable=False, index=True)
    DangerLevel = Column(String(20), nullable=False)
    Image = Column(String(255), nullable=True)

    def __repr__(self):
        return f'Animal ID:{self.AnimalID} Name:{self.Name} Species:{self.Species} Enclosure:{self.EnclosureID}'
