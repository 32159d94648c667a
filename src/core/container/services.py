"""Application container.

Builds every collaborator once and wires them by constructor injection.
The FastAPI app stores the container on ``app.state.container``; request
handlers reach it through the dependencies in
``src.core.container.dependencies``.

Usage:
    container = build_container(get_settings())
    result = await container.auth_service.login(email=..., password=...)
"""

from dataclasses import dataclass

from src.application.services import (
    AdminSessionService,
    AuditTrail,
    AuthService,
    SessionManager,
)
from src.core.config import Settings
from src.core.container.infrastructure import (
    create_audit,
    create_database,
    create_logger,
    create_password_service,
    create_token_service,
)
from src.domain.protocols import (
    AuditProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    SessionRepository,
    TokenGenerationProtocol,
    UserRepository,
)
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.repositories import (
    SessionRepository as SqlSessionRepository,
    UserRepository as SqlUserRepository,
)


@dataclass(frozen=True, kw_only=True)
class Container:
    """Process-wide collaborators, built once at startup."""

    settings: Settings
    logger: LoggerProtocol
    database: Database
    user_repo: UserRepository
    session_repo: SessionRepository
    password_service: PasswordHashingProtocol
    token_service: TokenGenerationProtocol
    audit: AuditProtocol
    session_manager: SessionManager
    auth_service: AuthService
    admin_session_service: AdminSessionService


def build_container(
    settings: Settings,
    *,
    logger: LoggerProtocol | None = None,
    audit: AuditProtocol | None = None,
) -> Container:
    """Wire the application.

    Args:
        settings: Loaded settings.
        logger: Override the structlog console logger.
        audit: Override the database audit adapter.

    Returns:
        Fully wired Container.
    """
    logger = logger or create_logger(settings)
    database = create_database(settings)
    user_repo = SqlUserRepository(database)
    session_repo = SqlSessionRepository(database)
    password_service = create_password_service(settings)
    token_service = create_token_service(settings)
    audit = audit or create_audit(database)

    audit_trail = AuditTrail(audit, logger)
    session_manager = SessionManager(
        session_repo=session_repo,
        token_service=token_service,
        logger=logger,
    )
    auth_service = AuthService(
        user_repo=user_repo,
        session_manager=session_manager,
        password_service=password_service,
        audit_trail=audit_trail,
        logger=logger,
    )
    admin_session_service = AdminSessionService(
        session_repo=session_repo,
        session_manager=session_manager,
        audit_trail=audit_trail,
        logger=logger,
    )

    return Container(
        settings=settings,
        logger=logger,
        database=database,
        user_repo=user_repo,
        session_repo=session_repo,
        password_service=password_service,
        token_service=token_service,
        audit=audit,
        session_manager=session_manager,
        auth_service=auth_service,
        admin_session_service=admin_session_service,
    )
