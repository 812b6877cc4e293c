"""frontdesk_db package initializer

Holds everything that talks to MongoDB directly: the shared client, the
collection schemas and the collection bootstrap.
"""

__all__ = [
    "connect_db",
    "create_collections",
    "schema",
]
