from typing import Any, Optional

from fastapi import APIRouter, Depends, Body, status, Path, Query
from sqlalchemy.orm import Session
from zoo import schemas
from zoo import services
from zoo import database
from . import dependencies

router = APIRouter()


@router.get('/', response_model=list[schemas.Animal], status_code=status.HTTP_200_OK)
def get_animals(healthStatus: Optional[str] = Query(None, title='exact health status'),
                db: Session = Depends(database.get_db)):
    return services.animal.get_animals(db, healthStatus)


@router.get('/enclosure/{enclosure_id}', response_model=list[schemas.Animal], status_code=status.HTTP_200_OK)
def get_animals_by_enclosure(enclosure_id: int = Path(..., title='id enclosure'),
                             db: Session = Depends(database.get_db)):
    return services.animal.get_animals_by_enclosure(db, enclosure_id)


@router.get('/{animal_id}', response_model=schemas.Animal, status_code=status.HTTP_200_OK)
def get_animal(animal_id: int = Path(..., title='id animal'),
               db: Session = Depends(database.get_db)):
    return services.animal.get_animal(db, animal_id)


@router.post('/', response_model=schemas.AnimalCreated, status_code=status.HTTP_201_CREATED)
def create_animal(animal: schemas.AnimalCreate = Body(...),
                  staff: schemas.StaffIdentity = Depends(dependencies.get_current_staff),
                  db: Session = Depends(database.get_db)):
    animal_id = services.animal.create_animal(db, staff, animal)
    return {'message': 'Animal added successfully', 'AnimalID': animal_id}


@router.put('/{animal_id}', response_model=schemas.AnimalUpdated, status_code=status.HTTP_200_OK)
def update_animal(animal_id: int = Path(..., title='id animal'),
                  # validated by the service after fields the caller may not change are dropped
                  animal: dict[str, Any] = Body(...),
                  staff: schemas.StaffIdentity = Depends(dependencies.get_current_staff),
                  db: Session = Depends(database.get_db)):
    updated = services.animal.update_animal(db, staff, animal_id, animal)
    return {'message': 'Animal updated successfully', 'animal': updated}


@router.delete('/{animal_id}', response_model=schemas.Message, status_code=status.HTTP_200_OK)
def delete_animal(animal_id: int = Path(..., title='id animal'),
                  staff: schemas.StaffIdentity = Depends(dependencies.get_current_staff),
                  db: Session = Depends(database.get_db)):
    services.animal.delete_animal(db, staff, animal_id)
    return {'message': 'Animal deleted successfully'}
