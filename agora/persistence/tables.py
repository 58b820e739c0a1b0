"""SQLAlchemy table definitions for Agora.

Core tables used by the PostgreSQL repositories. Schema changes are applied
outside this service; these definitions must be kept in step with the
deployed schema.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
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
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("external_id", String(255), nullable=False, unique=True),
    Column("email", String(255), nullable=False),
    Column("name", String(255), nullable=True),
    Column("location", String(255), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_users_email", users_table.c.email)

# ============================================================================
# ORGANIZATIONS TABLE
# ============================================================================
organizations_table = Table(
    "organizations",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("website", Text, nullable=True),
    Column("logo_url", Text, nullable=True),
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column(
        "parent_id",
        UUID,
        ForeignKey("organizations.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

Index("idx_organizations_parent_id", organizations_table.c.parent_id)

# ============================================================================
# ORGANIZATION MEMBERS TABLE
# ============================================================================
organization_members_table = Table(
    "organization_members",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "organization_id",
        UUID,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", String(20), nullable=False, server_default="member"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("user_id", "organization_id", name="uq_member_user_org"),
    CheckConstraint("role IN ('admin', 'member')", name="member_role_valid"),
)

Index("idx_organization_members_org_id", organization_members_table.c.organization_id)

# ============================================================================
# ACCESS REQUESTS TABLE
# ============================================================================
access_requests_table = Table(
    "access_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "organization_id",
        UUID,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column("message", Text, nullable=True),
    Column("reviewed_by_id", UUID, ForeignKey("users.id"), nullable=True),
    Column("reviewed_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("user_id", "organization_id", name="uq_access_request_user_org"),
    CheckConstraint(
        "status IN ('pending', 'approved', 'denied')", name="access_request_status_valid"
    ),
)

Index(
    "idx_access_requests_org_status",
    access_requests_table.c.organization_id,
    access_requests_table.c.status,
)

# ============================================================================
# POLICIES TABLE
# ============================================================================
policies_table = Table(
    "policies",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("summary", Text, nullable=True),
    Column("jurisdiction", String(255), nullable=True),
    Column("category", String(255), nullable=True),
    Column("target_law_name", Text, nullable=True),
    Column("target_law_text", Text, nullable=True),
    Column("readability_score", Float, nullable=True),
    Column("potential_conflicts", Text, nullable=True),
    Column("affected_groups", Text, nullable=True),
    Column("published", Boolean, nullable=False, server_default="false"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "organization_id",
        UUID,
        ForeignKey("organizations.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
)

Index("idx_policies_published_at", policies_table.c.published_at.desc())
Index("idx_policies_organization_id", policies_table.c.organization_id)
Index("idx_policies_author_id", policies_table.c.author_id)

# ============================================================================
# COMMENTS TABLE (one level of replies via parent_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "policy_id", UUID, ForeignKey("policies.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_name", String(255), nullable=True),  # Denormalized from users
    Column("content", Text, nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="downvotes_non_negative"),
)

Index(
    "idx_comments_policy_created",
    comments_table.c.policy_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# ENDORSEMENTS TABLE
# ============================================================================
endorsements_table = Table(
    "endorsements",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "policy_id", UUID, ForeignKey("policies.id", ondelete="CASCADE"), nullable=False
    ),
    Column("type", String(20), nullable=False, server_default="individual"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
    Column(
        "organization_id",
        UUID,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("statement", Text, nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("organization_id", "policy_id", name="uq_endorsement_org_policy"),
    CheckConstraint(
        "type IN ('individual', 'organization')", name="endorsement_type_valid"
    ),
)

Index("idx_endorsements_policy_id", endorsements_table.c.policy_id)
Index(
    "idx_endorsements_user_policy",
    endorsements_table.c.user_id,
    endorsements_table.c.policy_id,
)

# ============================================================================
# PETITION SIGNATURES TABLE
# ============================================================================
petition_signatures_table = Table(
    "petition_signatures",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column(
        "policy_id", UUID, ForeignKey("policies.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("full_name", String(200), nullable=False),
    Column("location", String(255), nullable=True),
    Column("email_verified", Boolean, nullable=False, server_default="false"),
    Column("verification_token", String(64), nullable=True, unique=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("policy_id", "user_id", name="uq_signature_policy_user"),
)

Index("idx_petition_signatures_policy_id", petition_signatures_table.c.policy_id)
