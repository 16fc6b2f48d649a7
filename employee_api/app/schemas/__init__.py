"""
Pydantic schema definitions for API payloads.

Schemas are the external (transfer) representation of employees and
are separated from the persisted records in ``services.mapper`` to
decouple the API representation from persistence.
"""
