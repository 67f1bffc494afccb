"""
Service layer abstraction.

Services hold the business rules of a domain and sit between the API
handlers and the repositories, so handlers never see SQL or entities.
"""
