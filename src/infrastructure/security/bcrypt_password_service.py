"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Cost factor 12 by default (~250ms per hash)
    - Random salt per hash, constant-time verification
    - bcrypt only looks at the first 72 bytes, so longer passwords are
      rejected on hashing rather than silently truncated

Performance:
    Hash and verify are CPU-bound; the auth service runs them via
    asyncio.to_thread so the event loop is never blocked.
"""

import bcrypt

MAX_PASSWORD_BYTES = 72


class BcryptPasswordService:
    """Password hashing with bcrypt.

    Usage:
        password_service = BcryptPasswordService(cost_factor=12)
        password_hash = password_service.hash_password("Secret123!")
        password_service.verify_password("Secret123!", password_hash)  # True
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt service.

        Args:
            cost_factor: Bcrypt log2 work factor. Each +1 doubles the cost.

        Raises:
            ValueError: If cost_factor is outside the range bcrypt accepts (4-31).
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)
        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Returns:
            60-character bcrypt hash ($2b$<cost>$<salt><hash>).

        Raises:
            ValueError: If the password is longer than 72 bytes (UTF-8).
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            msg = f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            raise ValueError(msg)
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        return bcrypt.hashpw(encoded, salt).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True on match. False on mismatch, malformed hash or oversized
            password (never raises).
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False
