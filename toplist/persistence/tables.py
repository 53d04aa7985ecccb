"""SQLAlchemy table definitions for the server toplist.

These tables are used for query building with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Identity,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (id is the identity provider's user ID)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        Enum("user", "admin", name="profile_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# SERVERS TABLE
# ============================================================================
servers_table = Table(
    "servers",
    metadata,
    Column("id", BigInteger, Identity(always=False), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("version", String(50), nullable=True),
    Column("type", String(50), nullable=True),
    Column("configuration", String(50), nullable=True),
    Column("exp_rate", Integer, nullable=True),
    Column("drop_rate", Integer, nullable=True),
    Column("website_url", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    Column("banner_url", Text, nullable=True),
    Column(
        "status",
        Enum("pending", "approved", "rejected", name="server_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column("is_featured", Boolean, nullable=False, server_default="false"),
    Column("votes_count", Integer, nullable=False, server_default="0"),
    Column("opening_date", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "owner_id",
        UUID,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("votes_count >= 0", name="votes_count_non_negative"),
)

Index("idx_servers_status_votes", servers_table.c.status, servers_table.c.votes_count.desc())
Index("idx_servers_opening_date", servers_table.c.opening_date)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    # No FK: voters are identities of the auth provider, not necessarily profiles
    Column("user_id", UUID, nullable=False),
    Column(
        "server_id",
        BigInteger,
        ForeignKey("servers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "voted_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # voted_at + cooldown, stored because index expressions must be immutable
    Column("cooldown_ends_at", TIMESTAMP(timezone=True), nullable=False),
    CheckConstraint("cooldown_ends_at > voted_at", name="cooldown_after_vote"),
)

Index(
    "idx_votes_user_server_voted_at",
    votes_table.c.user_id,
    votes_table.c.server_id,
    votes_table.c.voted_at.desc(),
)
# Note: the votes_no_overlapping_cooldown exclusion constraint (GiST over
# user_id, server_id and tstzrange(voted_at, cooldown_ends_at)) is created
# in the migration, not here
