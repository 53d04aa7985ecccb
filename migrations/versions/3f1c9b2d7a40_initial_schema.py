"""initial_schema

Create the schema for the server toplist:
- Profiles (one per authenticated user, username sign-in)
- Servers (listings with moderation status and a denormalized vote counter)
- Votes (one per user and server per 24 hour cooldown window)

Revision ID: 3f1c9b2d7a40
Revises:
Create Date: 2025-06-02 18:12:44.501223

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9b2d7a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')
    # GiST operator classes for scalar columns in the exclusion constraint
    op.execute('CREATE EXTENSION IF NOT EXISTS "btree_gist"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE server_status AS ENUM ('pending', 'approved', 'rejected');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE profile_role AS ENUM ('user', 'admin');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "role",
            sa.Enum("user", "admin", name="profile_role", create_type=False),
            nullable=False,
            server_default="user",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_profiles_username"),
    )

    # ========================================================================
    # SERVERS table
    # ========================================================================
    op.create_table(
        "servers",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("version", sa.String(50), nullable=True),
        sa.Column("type", sa.String(50), nullable=True),
        sa.Column("configuration", sa.String(50), nullable=True),
        sa.Column("exp_rate", sa.Integer(), nullable=True),
        sa.Column("drop_rate", sa.Integer(), nullable=True),
        sa.Column("website_url", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("banner_url", sa.Text(), nullable=True),
        sa.Column(
            "status",
            sa.Enum(
                "pending",
                "approved",
                "rejected",
                name="server_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column("is_featured", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("votes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("opening_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("owner_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["profiles.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("votes_count >= 0", name="votes_count_non_negative"),
    )
    op.create_index(
        "idx_servers_status_votes",
        "servers",
        ["status", sa.text("votes_count DESC")],
    )
    op.create_index("idx_servers_opening_date", "servers", ["opening_date"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("server_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "voted_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("cooldown_ends_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["server_id"], ["servers.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("cooldown_ends_at > voted_at", name="cooldown_after_vote"),
    )
    op.create_index(
        "idx_votes_user_server_voted_at",
        "votes",
        ["user_id", "server_id", sa.text("voted_at DESC")],
    )

    # At most one vote per (user, server) in any cooldown window, even when
    # two requests pass the application pre-check concurrently
    op.execute("""
        ALTER TABLE votes
        ADD CONSTRAINT votes_no_overlapping_cooldown
        EXCLUDE USING gist (
            user_id WITH =,
            server_id WITH =,
            tstzrange(voted_at, cooldown_ends_at) WITH &&
        )
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.drop_table("servers")
    op.drop_table("profiles")

    op.execute("DROP TYPE IF EXISTS profile_role")
    op.execute("DROP TYPE IF EXISTS server_status")
