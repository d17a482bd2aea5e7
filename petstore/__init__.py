# petstore/__init__.py
"""
In-memory pet store API and a client for remote instances of it.

Run the server with:
    uvicorn petstore:app --reload
"""

from .main import app, create_app

__all__ = ["app", "create_app"]
