"""
Top-level API router.

Aggregates the domain routers under their path prefixes.  The
application mounts this router under ``settings.api_prefix``.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customer", tags=["customer"])
