"""Application environment types.

Used by Settings to switch environment-specific behavior (cookie
security flags, log rendering).
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
