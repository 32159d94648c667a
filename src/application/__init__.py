"""Application layer - Use cases and orchestration.

Structure:
- services/: AuthService, SessionManager, AdminSessionService
- dtos/: Result dataclasses handed to the presentation layer

The application layer orchestrates domain logic through protocols; it
never imports infrastructure.
"""
