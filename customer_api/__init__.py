"""
Top-level package for the Customer API.

Makes ``customer_api`` a package so that modules within ``app`` can be
imported with fully qualified names like ``customer_api.app.main``.
All functionality lives in submodules under ``app``.
"""

__all__ = []
