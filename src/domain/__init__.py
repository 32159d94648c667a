"""Domain layer - Pure business logic.

Structure:
- entities/: User and Session entities
- enums/: Roles, statuses, audit actions
- errors/: Domain error values (returned in Result, never raised)
- policies/: Pure decision logic (lockout)
- protocols/: Ports implemented by infrastructure

The domain layer has NO dependencies on any framework or infrastructure.
"""
