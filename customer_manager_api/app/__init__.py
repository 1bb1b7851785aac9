"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings, logging, database, errors),
``schemas`` (pydantic models), ``repositories`` (SQL access),
``services`` (business rules) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
