# app/__init__.py
"""
Package entrypoint for the FastAPI application.

This lets us run:
    uvicorn app:app --reload

Swagger UI is served at /docs and the OpenAPI document at /openapi.json.
"""

from .main import app

__all__ = ["app"]
