"""API tests package.

End-to-end tests for REST endpoints using httpx.AsyncClient over
ASGITransport, backed by a per-test sqlite database.
"""
