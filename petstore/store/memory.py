# petstore/store/memory.py

import logging
from typing import Any, Dict, List, Mapping, Union

from petstore.models.pets import ApiError, Failure, NewPet, Pet, Result, Success

logger = logging.getLogger(__name__)

UNKNOWN_PET = 1000
MISSING_PROPERTY = 2000

# Demo records every fresh store starts with
SEED_PETS = (
    Pet(id=1, name="Barnaby", tag="Vicious"),
    Pet(id=2, name="Colin", tag="Accountant"),
)


class PetStore:
    """
    In-memory pet records keyed by id.

    Ids are issued from a counter that only moves forward, so an id is
    never handed out twice for the lifetime of the store. Each application
    instance owns its own store; nothing is shared between worker processes.
    """

    def __init__(self) -> None:
        logger.info("Initialising Pet Map for demo")
        self._pets: Dict[int, Pet] = {pet.id: pet for pet in SEED_PETS}
        self._last_id = max(self._pets)

    def __len__(self) -> int:
        return len(self._pets)

    def __contains__(self, pet_id: object) -> bool:
        return pet_id in self._pets

    @property
    def last_id(self) -> int:
        return self._last_id

    def list_pets(self) -> List[Pet]:
        return list(self._pets.values())

    def create_pet(self, data: Union[NewPet, Mapping[str, Any]]) -> Result[Pet]:
        """
        Validate and store a new pet. The store is left untouched when
        validation fails.
        """
        if isinstance(data, NewPet):
            name, tag = data.name, data.tag
        else:
            name, tag = data.get("name"), data.get("tag")

        if not isinstance(name, str) or not name:
            return Failure(
                ApiError(
                    code=MISSING_PROPERTY,
                    message="Required property not defined: name",
                )
            )

        pet_id = self._last_id + 1
        pet = Pet(id=pet_id, name=name, tag=tag if isinstance(tag, str) else None)
        self._pets[pet_id] = pet
        self._last_id = pet_id

        logger.debug("Created pet %s (%s)", pet_id, name)
        return Success(pet, status=201)

    def get_pet(self, pet_id: int) -> Result[Pet]:
        pet = self._pets.get(pet_id)
        if pet is None:
            return Failure(ApiError(code=UNKNOWN_PET, message="Unknown Pet identifier"))
        return Success(pet)
