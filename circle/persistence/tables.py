"""SQLAlchemy table definitions for Circle.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# Constraint names are matched when mapping IntegrityError to domain errors
USERNAME_CONSTRAINT = "uq_users_username"
EMAIL_CONSTRAINT = "uq_users_email"
LIKE_CONSTRAINT = "uq_liked_posts_user_post"

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password", String(255), nullable=False),  # bcrypt digest
    Column("nickname", String(255), nullable=True),
    Column("profile_pic", Text, nullable=True),
    Column("profile_banner", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("followers", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("following", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name=USERNAME_CONSTRAINT),
    UniqueConstraint("email", name=EMAIL_CONSTRAINT),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 10000", name="ck_posts_content_length"
    ),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())

# ============================================================================
# LIKED_POSTS TABLE (like events)
# ============================================================================
liked_posts_table = Table(
    "liked_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "post_id", name=LIKE_CONSTRAINT),
)

Index("idx_liked_posts_user_id", liked_posts_table.c.user_id)

# ============================================================================
# SHARED_POSTS TABLE (share events, repeatable)
# ============================================================================
shared_posts_table = Table(
    "shared_posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_shared_posts_user_id", shared_posts_table.c.user_id)
