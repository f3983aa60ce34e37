"""create_users_and_refresh_tokens

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-01-05 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users and refresh_tokens tables."""
    op.create_table(
        "users",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        # Identity
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="User email address (unique, lowercase)",
        ),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=False,
            comment="Display name",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=True,
            comment="Bcrypt hashed password (NULL until password setup)",
        ),
        sa.Column(
            "role",
            sa.String(length=20),
            server_default="USER",
            nullable=False,
            comment="USER or ADMIN",
        ),
        sa.Column(
            "is_verified",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="Admin verification status (must be True to login)",
        ),
        # One-time token slots
        sa.Column(
            "password_setup_token",
            sa.String(length=64),
            nullable=True,
            comment="One-time password setup token (hex)",
        ),
        sa.Column(
            "password_setup_token_expires_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Setup token absolute expiry (24h after issue)",
        ),
        sa.Column(
            "password_reset_token",
            sa.String(length=64),
            nullable=True,
            comment="One-time password reset token (hex)",
        ),
        sa.Column(
            "password_reset_token_expires_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Reset token absolute expiry (1h after issue)",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("password_setup_token"),
        sa.UniqueConstraint("password_reset_token"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_is_verified"), "users", ["is_verified"])

    op.create_table(
        "refresh_tokens",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Integer(),
            nullable=False,
            comment="User who owns this refresh token",
        ),
        sa.Column(
            "token",
            sa.Text(),
            nullable=True,
            comment="Signed refresh token (NULL between create and finalize)",
        ),
        sa.Column(
            "expires_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Absolute expiry",
        ),
        sa.Column(
            "revoked",
            sa.Boolean(),
            server_default=sa.false(),
            nullable=False,
            comment="Revocation flag",
        ),
        sa.Column(
            "revoked_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Timestamp when token was revoked",
        ),
        sa.Column(
            "ip_address",
            sa.String(length=45),
            nullable=True,
            comment="Client IP address at issuance",
        ),
        sa.Column(
            "user_agent",
            sa.Text(),
            nullable=True,
            comment="Client User-Agent at issuance",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
    )
    op.create_index(
        op.f("ix_refresh_tokens_user_id"), "refresh_tokens", ["user_id"]
    )
    op.create_index(
        op.f("ix_refresh_tokens_expires_at"), "refresh_tokens", ["expires_at"]
    )
    op.create_index(
        "idx_refresh_tokens_user_live", "refresh_tokens", ["user_id", "revoked"]
    )


def downgrade() -> None:
    """Drop refresh_tokens and users tables."""
    op.drop_index("idx_refresh_tokens_user_live", table_name="refresh_tokens")
    op.drop_index(op.f("ix_refresh_tokens_expires_at"), table_name="refresh_tokens")
    op.drop_index(op.f("ix_refresh_tokens_user_id"), table_name="refresh_tokens")
    op.drop_table("refresh_tokens")
    op.drop_index(op.f("ix_users_is_verified"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
