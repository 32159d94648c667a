"""ASGI-level API components (middleware)."""
