# petstore/models/pets.py

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class Pet(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    tag: Optional[str] = None


class NewPet(BaseModel):
    """
    Body of POST /pets. Both fields are optional here so that a missing
    name reaches the store and is reported with its own error code.
    """

    name: Optional[str] = None
    tag: Optional[str] = None


class ApiError(BaseModel):
    code: int
    message: str


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    status: int = 200


@dataclass(frozen=True)
class Failure:
    error: ApiError
    status: int = 400


Result = Union[Success[T], Failure]
