from .animal import Animal, AnimalCreate, AnimalPatchUpdate, AnimalCreated, AnimalUpdated, Message
from .staff import StaffIdentity
