"""Infrastructure factories.

Each factory builds one adapter from Settings. They are called once by
build_container() at process start; nothing here is cached at module
scope, so tests can build as many independent containers as they like.
"""

from datetime import timedelta

from src.core.config import Settings
from src.domain.protocols import AuditProtocol, LoggerProtocol
from src.infrastructure.audit import DatabaseAuditAdapter
from src.infrastructure.logging import ConsoleAdapter
from src.infrastructure.persistence.database import Database
from src.infrastructure.security import BcryptPasswordService, JWTService


def create_logger(settings: Settings) -> LoggerProtocol:
    """Structured console logger; JSON in production."""
    return ConsoleAdapter(use_json=settings.is_production, level=settings.log_level)


def create_database(settings: Settings) -> Database:
    return Database(database_url=settings.database_url, echo=settings.db_echo)


def create_password_service(settings: Settings) -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


def create_token_service(settings: Settings) -> JWTService:
    """JWT issuer with the configured lifetimes.

    The refresh lifetime doubles as the session row expiry.
    """
    return JWTService(
        secret_key=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        access_token_lifetime=timedelta(hours=settings.access_token_expire_hours),
        refresh_token_lifetime=timedelta(days=settings.refresh_token_expire_days),
    )


def create_audit(database: Database) -> AuditProtocol:
    return DatabaseAuditAdapter(database)
