"""
Application package initializer.

This package contains the entrypoint for the API and its submodules:
``core`` (configuration, logging, database, exceptions), ``models``
(entities), ``schemas`` (wire DTOs), ``repositories`` (SQL access),
``services`` (business rules) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
