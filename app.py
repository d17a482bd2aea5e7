# app.py
"""
Thin entrypoint for the API.

Usage example:
    uvicorn app:app --reload
"""

from petstore.main import app  # re-export FastAPI instance
