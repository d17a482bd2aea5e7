# petstore/api/pets.py

import json
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from petstore.exceptions import InvalidJSONError
from petstore.models.pets import ApiError, Failure, NewPet, Pet, Result
from petstore.store.memory import PetStore

router = APIRouter(prefix="/pets", tags=["pets"])

ERROR_RESPONSES = {400: {"model": ApiError}}


def get_store(request: Request) -> PetStore:
    return request.app.state.store


def _respond(result: Result) -> JSONResponse:
    if isinstance(result, Failure):
        return JSONResponse(status_code=result.status, content=result.error.model_dump())

    return JSONResponse(
        status_code=result.status,
        content=jsonable_encoder(result.value, exclude_none=True),
    )


@router.get("", response_model=List[Pet], response_model_exclude_none=True)
def list_pets(store: PetStore = Depends(get_store)) -> List[Pet]:
    """
    Return every pet, in the order they were added.
    """
    return store.list_pets()


@router.post(
    "",
    status_code=201,
    response_model=Pet,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": NewPet.model_json_schema()}},
        }
    },
)
async def create_pet(request: Request, store: PetStore = Depends(get_store)) -> JSONResponse:
    """
    Create a pet from a JSON body ``{"name": ..., "tag": ...}``.

    The body is decoded here rather than by FastAPI so that malformed JSON
    is answered with the service's own error shape.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw)
        # Lone surrogates decode but can never be written back out as UTF-8
        json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (ValueError, RecursionError):
        raise InvalidJSONError()

    # Valid JSON that isn't an object carries no name
    data = payload if isinstance(payload, dict) else {}

    return _respond(store.create_pet(data))


# The int convertor only matches decimal digits; anything else falls
# through to the 404 handler.
@router.get(
    "/{pet_id:int}",
    response_model=Pet,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
def get_pet(pet_id: int, store: PetStore = Depends(get_store)) -> JSONResponse:
    """
    Look up a single pet by id.
    """
    return _respond(store.get_pet(pet_id))
