"""Create user and weddingsite tables

Revision ID: w1_1_wedding_sites
"""
from alembic import op
import sqlalchemy as sa

revision = "w1_1_wedding_sites"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "user",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("has_paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_user_id", "user", ["id"])
    op.create_index("ix_user_email", "user", ["email"], unique=True)

    op.create_table(
        "weddingsite",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("subdomain", sa.String(63), nullable=False),
        sa.Column("custom_domain", sa.String(255), nullable=True),
        sa.Column("partner1_name", sa.String(255), nullable=False),
        sa.Column("partner2_name", sa.String(255), nullable=False),
        sa.Column("partner1_email", sa.String(255), nullable=True),
        sa.Column("partner2_email", sa.String(255), nullable=True),
        sa.Column("wedding_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("wedding_time", sa.String(32), nullable=True),
        sa.Column("venue_name", sa.String(255), nullable=False),
        sa.Column("venue_address", sa.String(500), nullable=False),
        sa.Column("venue_city", sa.String(255), nullable=False),
        sa.Column("venue_state", sa.String(255), nullable=False),
        sa.Column("venue_zip", sa.String(32), nullable=False),
        sa.Column("venue_country", sa.String(255), nullable=True),
        sa.Column("primary_color", sa.String(7), nullable=True),
        sa.Column("secondary_color", sa.String(7), nullable=True),
        sa.Column("welcome_message", sa.Text(), nullable=True),
        sa.Column("about_us_story", sa.Text(), nullable=True),
        sa.Column("rsvp_enabled", sa.Boolean(), nullable=True),
        sa.Column("gifts_enabled", sa.Boolean(), nullable=True),
        sa.Column("accommodation_enabled", sa.Boolean(), nullable=True),
        sa.Column("transport_enabled", sa.Boolean(), nullable=True),
        sa.Column("guest_list_enabled", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_weddingsite_id", "weddingsite", ["id"])
    op.create_index("ix_weddingsite_user_id", "weddingsite", ["user_id"])
    op.create_index("ix_weddingsite_subdomain", "weddingsite", ["subdomain"], unique=True)
    # One site per custom domain; NULL (no domain) is not constrained
    op.create_index("ix_weddingsite_custom_domain", "weddingsite", ["custom_domain"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_weddingsite_custom_domain", table_name="weddingsite")
    op.drop_index("ix_weddingsite_subdomain", table_name="weddingsite")
    op.drop_index("ix_weddingsite_user_id", table_name="weddingsite")
    op.drop_index("ix_weddingsite_id", table_name="weddingsite")
    op.drop_table("weddingsite")
    op.drop_index("ix_user_email", table_name="user")
    op.drop_index("ix_user_id", table_name="user")
    op.drop_table("user")
