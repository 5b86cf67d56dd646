"""
Pydantic schema definitions for API payloads.

Schemas are separated from the ``models`` entity to decouple the API
representation (camelCase wire names) from persistence.
"""
