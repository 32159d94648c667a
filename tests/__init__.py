"""Test suite for the LeadNex auth service.

- unit/: domain, application services and schemas in isolation (mocks)
- integration/: adapters and services against a sqlite database
- api/: HTTP endpoints through the full FastAPI app
"""
