"""Routers.

- api: prefixed API (auth, admin sessions)
- system: root and health endpoints outside the API prefix
"""

from src.presentation.routers.api import api_router
from src.presentation.routers.system import system_router

__all__ = ["api_router", "system_router"]
