"""Session database model.

One row per issued token pair. The row is the authority for token
validity: deleting it revokes both tokens.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel, utc_now


class Session(BaseModel):
    """Session model.

    Fields:
        id, created_at: From BaseModel.
        user_id: Owning user (cascade delete).
        access_token: Current access token (unique, point lookups).
        refresh_token: Current refresh token (unique, point lookups).
        expires_at: Storage-level expiry of the pair.
        ip_address: Client IP at creation/rotation.
        user_agent: Client user agent at creation/rotation.
        last_used_at: Last validation or rotation.

    Indexes:
        - idx_sessions_user_id: per-user listing and bulk revoke
        - idx_sessions_expires_at: active-session queries
    """

    __tablename__ = "sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="User who owns this session",
    )
    access_token: Mapped[str] = mapped_column(
        String(1024),
        unique=True,
        nullable=False,
        comment="Signed access token for this session",
    )
    refresh_token: Mapped[str] = mapped_column(
        String(1024),
        unique=True,
        nullable=False,
        comment="Signed refresh token for this session",
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Expiry of the token pair as stored",
    )
    ip_address: Mapped[str | None] = mapped_column(
        String(45),  # IPv6 max length
        nullable=True,
    )
    user_agent: Mapped[str | None] = mapped_column(String(500), nullable=True)
    last_used_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    __table_args__ = (
        Index("idx_sessions_user_id", "user_id"),
        Index("idx_sessions_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<Session(id={self.id}, user_id={self.user_id}, "
            f"expires_at={self.expires_at})>"
        )
