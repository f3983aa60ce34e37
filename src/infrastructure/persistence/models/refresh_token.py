"""Refresh token database model (session ledger).

Each row is one device session. The row id is signed into the refresh token
as `tokenId`; the signed string itself is stored only for reference.

Lifecycle:
    1. Inserted on login / rotation with token NULL (id needed for signing)
    2. Token column filled once the refresh token is signed
    3. Deleted when consumed by a rotation (replacement row inserted)
    4. Revoked on logout, logout-all, password reset or replay detection
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class RefreshToken(BaseMutableModel):
    """Refresh token ledger record.

    Fields:
        id: Integer primary key, the `tokenId` claim (from BaseMutableModel)
        created_at / updated_at: Timestamps (from BaseMutableModel)
        user_id: Foreign key to users table (cascade delete)
        token: Signed refresh token (unique, NULL until finalized)
        expires_at: Absolute expiry
        revoked: Revocation flag
        revoked_at: Timestamp when revoked (nullable)
        ip_address: Client IP at issuance
        user_agent: Client User-Agent at issuance

    Indexes:
        - user_id: revoke-all and replay revocation
        - expires_at: expiry checks
        - idx_refresh_tokens_user_live: (user_id, revoked)
    """

    __tablename__ = "refresh_tokens"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who owns this refresh token",
    )

    token: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        unique=True,
        default=None,
        comment="Signed refresh token (NULL between create and finalize)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Absolute expiry",
    )

    revoked: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="0",
        comment="Revocation flag",
    )

    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Timestamp when token was revoked",
    )

    ip_address: Mapped[str | None] = mapped_column(
        String(45),
        nullable=True,
        default=None,
        comment="Client IP address at issuance",
    )

    user_agent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
        comment="Client User-Agent at issuance",
    )

    __table_args__ = (
        Index("idx_refresh_tokens_user_live", "user_id", "revoked"),
    )

    def __repr__(self) -> str:
        """String representation for debugging (never includes the token)."""
        return (
            f"<RefreshToken("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"expires_at={self.expires_at}, "
            f"revoked={self.revoked}"
            f")>"
        )
