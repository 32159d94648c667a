"""Infrastructure layer - Adapters implementing domain protocols.

Structure:
- persistence/: Database, models and repositories (SQLAlchemy)
- security/: Password hashing (bcrypt) and token signing (PyJWT)
- audit/: Audit trail adapter
- logging/: Structured logging adapter (structlog)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
