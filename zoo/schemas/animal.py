from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class AnimalBase(BaseModel):
    Name: str
    Species: str
    DateOfBirth: date
    Gender: str
    HealthStatus: str
    LastVetCheckup: date
    EnclosureID: int
    DangerLevel: str
    Image: Optional[str] = None


class Animal(AnimalBase):
    AnimalID: int

    model_config = ConfigDict(from_attributes=True)


class AnimalCreate(AnimalBase):
    # presence and truthiness of required fields is checked by the service,
    # so that a missing field is a 400 like any other rejected payload
    Name: Optional[str] = None
    Species: Optional[str] = None
    DateOfBirth: Optional[date] = None
    Gender: Optional[str] = None
    HealthStatus: Optional[str] = None
    LastVetCheckup: Optional[date] = None
    EnclosureID: Optional[int] = None
    DangerLevel: Optional[str] = None


# AnimalID is not a field here, a client can never change it
class AnimalPatchUpdate(AnimalCreate):
    pass


class AnimalCreated(BaseModel):
    message: str
    AnimalID: int


class AnimalUpdated(BaseModel):
    message: str
    animal: Animal


class Message(BaseModel):
    message: str
