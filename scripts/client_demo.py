# scripts/client_demo.py
"""
Call a remote pet store with PetStoreClient and print a short report.

The target comes from PETSTORE_CLIENT_BASE_URL / PETSTORE_CLIENT_API_KEY.

Usage:
    python -m scripts.client_demo
"""

import logging

from petstore.client import PetStoreClient
from petstore.config import get_settings
from petstore.exceptions import PetStoreTransportError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

SEPARATOR = "-" * 50


def _describe(pet: dict) -> str:
    line = f"ID: {pet.get('id')}, Name: {pet.get('name')}"
    if pet.get("tag"):
        line += f", Type: {pet['tag']}"
    return line


def _error_message(body) -> str:
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return "Unknown error"


def main():
    settings = get_settings()

    print("=== PET STORE API CLIENT ===\n")

    try:
        with PetStoreClient(settings.CLIENT_BASE_URL, settings.CLIENT_API_KEY) as client:
            print("1. Creating a new pet...")
            status, body = client.create("Rex", "Dog")
            if status == 201:
                print(f"Pet created: {_describe(body)}")
            else:
                print(f"Error creating pet: {_error_message(body)}")

            print(f"\n{SEPARATOR}\n")

            print("2. Retrieving all pets...")
            status, body = client.list_all()
            if status == 200 and isinstance(body, list):
                print(f"{len(body)} pets found:")
                for pet in body:
                    print(f" - {_describe(pet)}")
            else:
                print(f"Error retrieving pets: {_error_message(body)}")

            print(f"\n{SEPARATOR}\n")

            print("3. Retrieving a specific pet...")
            status, body = client.get_by_id(1)
            if status == 200:
                print(f"Pet found: {_describe(body)}")
            else:
                print(f"Error retrieving pet: {_error_message(body)}")

    except PetStoreTransportError as e:
        logger.error("Could not reach %s: %s", settings.CLIENT_BASE_URL, e.reason)


if __name__ == "__main__":
    main()
