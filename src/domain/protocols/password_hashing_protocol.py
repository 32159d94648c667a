"""Password hashing protocol for domain layer.

Infrastructure layer provides the concrete implementation
(BcryptPasswordService). Hashing is CPU-bound; async callers off-load
these calls with ``asyncio.to_thread``.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface."""

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash, False otherwise (including
            malformed hashes; never raises).
        """
        ...
