"""
Repository layer.

Repositories hold the SQL for one table each and return entities from
``app.models``.  Services call them; API handlers never do.
"""
