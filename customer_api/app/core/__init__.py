"""
Core infrastructure: settings, logging, database access and the
exception types shared by the service and API layers.
"""
