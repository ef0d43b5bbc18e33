"""Animal rules: the staff role gate and per-field update permissions."""
import logging
from typing import Any, Callable, Optional

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session
from zoo import repositories
from zoo import schemas
from zoo.utils import exceptions

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('Name', 'Species', 'DateOfBirth', 'Gender', 'HealthStatus', 'LastVetCheckup', 'EnclosureID',
                   'DangerLevel')


def _manager(staff: schemas.StaffIdentity) -> bool:
    return staff.is_manager


def _keeper_or_vet(staff: schemas.StaffIdentity) -> bool:
    return staff.is_zookeeper or staff.is_vet or staff.is_manager


def _vet(staff: schemas.StaffIdentity) -> bool:
    return staff.is_vet or staff.is_manager


# who may change which column on update
FIELD_PERMISSIONS: dict[str, Callable[[schemas.StaffIdentity], bool]] = {
    'Name': _manager,
    'Species': _manager,
    'DateOfBirth': _manager,
    'Gender': _manager,
    'HealthStatus': _keeper_or_vet,
    'LastVetCheckup': _vet,
    'EnclosureID': _manager,
    'DangerLevel': _manager,
    'Image': _manager,
}


def passes_staff_gate(staff: schemas.StaffIdentity) -> bool:
    # a non-staff account whose staffRole is Manager gets through too
    return staff.role == 'staff' or staff.is_manager


def permitted_fields(staff: schemas.StaffIdentity, submitted: dict[str, Any]) -> dict[str, Any]:
    """Fields sent in the request that ``staff`` may change, validated. The rest are dropped silently.

    Filtering happens on the raw body, so a bad value in a field the caller
    may not touch never fails the request.
    """
    allowed = {field: value for field, value in submitted.items()
               if field in FIELD_PERMISSIONS and FIELD_PERMISSIONS[field](staff)}
    dropped = submitted.keys() & (FIELD_PERMISSIONS.keys() - allowed.keys())
    if dropped:
        logger.info('Dropping fields %s for %s (role=%s, staffRole=%s, staffType=%s)',
                    sorted(dropped), staff.subject, staff.role, staff.staffRole, staff.staffType)
    try:
        data = schemas.AnimalPatchUpdate.model_validate(allowed)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
    return data.model_dump(exclude_unset=True)


def get_animals(db: Session, health_status: Optional[str] = None) -> list[schemas.Animal]:
    with exceptions.store_errors(db, 'Failed to fetch animals'):
        return repositories.get_animals(db, health_status)


def get_animal(db: Session, animal_id: int) -> schemas.Animal:
    with exceptions.store_errors(db, 'Failed to fetch animal'):
        animal = repositories.get_animal_by_id(db, animal_id)
    if animal is None:
        raise exceptions.not_found_exception('Animal not found')
    return animal


def get_animals_by_enclosure(db: Session, enclosure_id: int) -> list[schemas.Animal]:
    with exceptions.store_errors(db, 'Failed to fetch animals by enclosure'):
        return repositories.get_animals_by_enclosure(db, enclosure_id)


def create_animal(db: Session, staff: schemas.StaffIdentity, data: schemas.AnimalCreate) -> int:
    if not all(getattr(data, field) for field in REQUIRED_FIELDS):
        raise exceptions.bad_request_exception('All required fields must be provided')
    if not passes_staff_gate(staff):
        logger.info('Staff gate refused %s on create', staff.subject)
        raise exceptions.forbidden_exception('You do not have permission to add animals.')
    with exceptions.store_errors(db, 'Failed to add animal'):
        animal_id = repositories.create_animal(db, data)
    logger.info('Animal %s added by %s', animal_id, staff.subject)
    return animal_id


def update_animal(db: Session, staff: schemas.StaffIdentity, animal_id: int,
                  data: dict[str, Any]) -> schemas.Animal:
    if not passes_staff_gate(staff):
        logger.info('Staff gate refused %s on update of animal %s', staff.subject, animal_id)
        raise exceptions.forbidden_exception('You do not have permission to update animals')
    fields = permitted_fields(staff, data)
    if not fields:
        raise exceptions.bad_request_exception(
            'No fields to update or you do not have permission to update these fields')
    with exceptions.store_errors(db, 'Failed to update animal'):
        if repositories.update_animal(db, animal_id, fields) == 0:
            raise exceptions.not_found_exception('Animal not found')
        animal = repositories.get_animal_by_id(db, animal_id)
    # removed between the update and the re-read
    if animal is None:
        raise exceptions.not_found_exception('Animal not found')
    return animal


def delete_animal(db: Session, staff: schemas.StaffIdentity, animal_id: int):
    if not passes_staff_gate(staff):
        logger.info('Staff gate refused %s on delete of animal %s', staff.subject, animal_id)
        raise exceptions.forbidden_exception('You do not have permission to delete animals')
    with exceptions.store_errors(db, 'Failed to delete animal'):
        deleted = repositories.delete_animal(db, animal_id)
    if deleted == 0:
        raise exceptions.not_found_exception('Animal not found')
    logger.info('Animal %s deleted by %s', animal_id, staff.subject)
