"""
Persistence-side entities.

Entities mirror database rows and never leave the service layer; the
API works with the pydantic schemas in ``app.schemas`` instead.
"""
