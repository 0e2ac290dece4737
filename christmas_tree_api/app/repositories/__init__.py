"""
Repository layer.

Repositories hide the storage engine from the services so the SQLite
implementation can be replaced without touching the API handlers.
"""
