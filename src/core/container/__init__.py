"""Container module - Centralized dependency injection.

- infrastructure: adapter factories (database, logger, security, audit)
- services: Container dataclass and build_container()
- dependencies: FastAPI dependencies reading app.state.container
"""

from src.core.container.dependencies import (
    get_admin_session_service,
    get_auth_service,
    get_container,
    get_logger,
    get_settings_dependency,
)
from src.core.container.services import Container, build_container

__all__ = [
    "Container",
    "build_container",
    "get_admin_session_service",
    "get_auth_service",
    "get_container",
    "get_logger",
    "get_settings_dependency",
]
