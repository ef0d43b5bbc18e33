from .animal import (
    get_animals,
    get_animal_by_id,
    get_animals_by_enclosure,
    create_animal,
    update_animal,
    delete_animal
)
