"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the store so that the API representation
(``createdAt`` and friends) does not leak into storage code.
"""
