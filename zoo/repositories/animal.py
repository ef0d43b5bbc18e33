from typing import Any, Optional
from sqlalchemy import Date, bindparam, text
from sqlalchemy.orm import Session
from zoo import schemas

# date columns are bound with an explicit type so every driver gets a real DATE
_DATE_COLUMNS = ('DateOfBirth', 'LastVetCheckup')


def _statement(sql: str):
    stmt = text(sql)
    date_params = [bindparam(column, type_=Date) for column in _DATE_COLUMNS if f':{column}' in sql]
    if date_params:
        stmt = stmt.bindparams(*date_params)
    return stmt


def get_animals(db: Session, health_status: Optional[str] = None) -> list[schemas.Animal]:
    if health_status:
        result = db.execute(text("""SELECT * FROM animals WHERE "HealthStatus" = :health_status"""),
                            {'health_status': health_status}).mappings().all()
    else:
        result = db.execute(text("""SELECT * FROM animals""")).mappings().all()
    return [schemas.Animal(**row) for row in result]


def get_animal_by_id(db: Session, animal_id: int) -> Optional[schemas.Animal]:
    result = db.execute(text("""SELECT * FROM animals WHERE "AnimalID" = :animal_id"""),
                        {'animal_id': animal_id}).mappings().first()
    if result is None:
        return None
    return schemas.Animal(**result)


def get_animals_by_enclosure(db: Session, enclosure_id: int) -> list[schemas.Animal]:
    result = db.execute(text("""SELECT * FROM animals WHERE "EnclosureID" = :enclosure_id"""),
                        {'enclosure_id': enclosure_id}).mappings().all()
    return [schemas.Animal(**row) for row in result]


def create_animal(db: Session, animal: schemas.AnimalCreate) -> int:
    """Insert a row and return the AnimalID the database generated for it"""
    values = animal.model_dump(exclude={'Image'})
    values['Image'] = animal.Image or None
    animal_id = db.execute(_statement("""
        INSERT INTO animals ("Name", "Species", "DateOfBirth", "Gender", "HealthStatus", "LastVetCheckup",
                             "EnclosureID", "DangerLevel", "Image")
        VALUES (:Name, :Species, :DateOfBirth, :Gender, :HealthStatus, :LastVetCheckup,
                :EnclosureID, :DangerLevel, :Image)
        RETURNING "AnimalID"
        """), values).scalar()
    db.commit()
    return animal_id


def update_animal(db: Session, animal_id: int, fields: dict[str, Any]) -> int:
    """Set exactly ``fields`` in one statement. Returns the number of matched rows.

    Column names come from the schema, never from the request body.
    """
    assignments = ', '.join(f'"{column}" = :{column}' for column in fields)
    params = dict(fields)
    params['animal_id'] = animal_id
    result = db.execute(_statement(f"""UPDATE animals SET {assignments} WHERE "AnimalID" = :animal_id"""),
                        params)
    db.commit()
    return result.rowcount


def delete_animal(db: Session, animal_id: int) -> int:
    result = db.execute(text("""DELETE FROM animals WHERE "AnimalID" = :animal_id"""),
                        {'animal_id': animal_id})
    db.commit()
    return result.rowcount
