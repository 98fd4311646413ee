"""
Service layer abstraction.

The book store lives here.  Handlers only talk to the ``BookStore``
interface, so the in‑memory implementation used today can be swapped
for a persistent one without changing the API layer.
"""
