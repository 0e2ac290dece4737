"""
API package.

``router`` aggregates the domain routers defined in ``endpoints``.
"""
