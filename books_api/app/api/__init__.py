"""
API package containing the HTTP routes.

``router`` aggregates the domain routers defined in ``endpoints`` and is
included by the application factory.
"""
