"""SQLAlchemy table definitions for the feature board.

Using SQLAlchemy Core (not ORM) since domain models are Pydantic.
"""

from sqlalchemy import (
    TIMESTAMP,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(128), primary_key=True),  # Identity provider uid
    Column("email", String(255), nullable=True),
    Column(
        "upvoted_on",
        ARRAY(String(64)),
        nullable=False,
        server_default=text("'{}'"),
    ),
    Column("attributes", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# REQUESTS TABLE
# ============================================================================
requests_table = Table(
    "requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
)

Index("idx_requests_upvotes", requests_table.c.upvotes.desc())

# ============================================================================
# VOTES TABLE
# ============================================================================
# No foreign key to users: deleting a user keeps its ledger rows
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", String(128), nullable=False),
    Column(
        "request_id",
        UUID,
        ForeignKey("requests.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "request_id", name="unique_vote"),
)

# ============================================================================
# ACTIVITIES TABLE
# ============================================================================
activities_table = Table(
    "activities",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_activities_created_at", activities_table.c.created_at)
