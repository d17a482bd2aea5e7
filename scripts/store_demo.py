# scripts/store_demo.py
"""
Exercise the in-memory store directly, without HTTP, and print what it
returns.

Usage:
    python -m scripts.store_demo
"""

import json

from petstore.models.pets import Failure
from petstore.store.memory import PetStore


def _show(result):
    if isinstance(result, Failure):
        body = result.error.model_dump()
    else:
        body = result.value.model_dump(exclude_none=True)
    print(f"Status: {result.status}")
    print(f"Body: {json.dumps(body, indent=4)}")


def main():
    print("=== Pet Store API - store checks ===")

    store = PetStore()

    print("\n1. Getting all pets:")
    pets = [pet.model_dump(exclude_none=True) for pet in store.list_pets()]
    print(json.dumps(pets, indent=4))

    print("\n2. Creating a new pet:")
    _show(store.create_pet({"name": "Rex", "tag": "Dog"}))

    print("\n3. Getting pet by ID (1):")
    _show(store.get_pet(1))

    print("\n4. Getting non-existent pet:")
    _show(store.get_pet(999))


if __name__ == "__main__":
    main()
