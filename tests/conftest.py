# tests/conftest.py

import os

# Settings are read when petstore.main is imported
os.environ.setdefault("PETSTORE_API_PREFIX", "")

import pytest
from fastapi.testclient import TestClient

from petstore.main import create_app
from petstore.store.memory import PetStore


@pytest.fixture
def store():
    return PetStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
