"""Domain protocols (ports).

Structural interfaces the application layer depends on; infrastructure
adapters implement them without inheriting.
"""

from src.domain.protocols.audit_protocol import AuditProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.session_repository import (
    SessionOwner,
    SessionRepository,
    SessionWithOwner,
    UserSessionCount,
)
from src.domain.protocols.token_generation_protocol import (
    IssuedTokens,
    TokenClaims,
    TokenGenerationProtocol,
    TokenType,
)
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    "AuditProtocol",
    "IssuedTokens",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "SessionOwner",
    "SessionRepository",
    "SessionWithOwner",
    "TokenClaims",
    "TokenGenerationProtocol",
    "TokenType",
    "UserRepository",
    "UserSessionCount",
]
