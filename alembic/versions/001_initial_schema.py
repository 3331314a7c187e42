"""initial schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""
from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ENUM, JSONB, UUID

from alembic import op

revision: str = "001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

product_condition = ENUM("NEW", "USED", "REFURBISHED", name="product_condition", create_type=False)
product_availability = ENUM(
    "AVAILABLE", "OUT_OF_STOCK", "LIMITED", "ON_DEMAND", name="product_availability", create_type=False
)
product_status = ENUM(
    "ACTIVE", "INACTIVE", "PENDING", "REJECTED", "EXPIRED", name="product_status", create_type=False
)
trade_type = ENUM("BUYING", "SELLING", "PARTNERSHIP", "INVESTMENT", name="trade_type", create_type=False)
suggestion_status = ENUM(
    "ACTIVE", "CLOSED", "EXPIRED", "PENDING", name="suggestion_status", create_type=False
)

_ENUMS = (product_condition, product_availability, product_status, trade_type, suggestion_status)


def _timestamps() -> list[sa.Column]:  # type: ignore[type-arg]
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in _ENUMS:
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("name", sa.String(256), nullable=True),
        sa.Column("company", sa.String(256), nullable=True),
        sa.Column("role", sa.String(32), nullable=False, server_default="EXPORTER"),
        sa.Column("country", sa.String(128), nullable=True),
        sa.Column("city", sa.String(128), nullable=True),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        "categories",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(128), nullable=False, unique=True),
        sa.Column("slug", sa.String(160), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("image", sa.String(2048), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "parent_id",
            UUID(as_uuid=True),
            sa.ForeignKey("categories.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
    )

    op.create_table(
        "products",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("category_id", UUID(as_uuid=True), sa.ForeignKey("categories.id"), nullable=False),
        # Listing content
        sa.Column("title", sa.String(512), nullable=False),
        sa.Column("slug", sa.String(600), nullable=False, unique=True),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("short_desc", sa.String(512), nullable=True),
        sa.Column("brand", sa.String(128), nullable=True),
        sa.Column("model", sa.String(128), nullable=True),
        sa.Column("hs_code", sa.String(32), nullable=True),
        sa.Column("origin", sa.String(128), nullable=True),
        sa.Column("images", JSONB, nullable=False, server_default=sa.text("'[]'")),
        sa.Column("keywords", JSONB, nullable=False, server_default=sa.text("'[]'")),
        sa.Column("specifications", JSONB, nullable=False, server_default=sa.text("'{}'")),
        # Commercial terms
        sa.Column("price", sa.Numeric(12, 2), nullable=True),
        sa.Column("currency", sa.String(3), nullable=False, server_default="USD"),
        sa.Column("min_order", sa.String(128), nullable=True),
        sa.Column("unit", sa.String(64), nullable=True),
        sa.Column("condition", product_condition, nullable=False),
        sa.Column("availability", product_availability, nullable=False),
        # Location
        sa.Column("country", sa.String(128), nullable=False),
        sa.Column("state", sa.String(128), nullable=True),
        sa.Column("city", sa.String(128), nullable=True),
        # Lifecycle
        sa.Column("status", product_status, nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_promoted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_products_user_id", "products", ["user_id"])
    op.create_index("ix_products_category_id", "products", ["category_id"])
    op.create_index("ix_products_status_created_at", "products", ["status", "created_at"])
    op.create_index("ix_products_status_price", "products", ["status", "price"])

    op.create_table(
        "trade_suggestions",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", trade_type, nullable=False),
        sa.Column("category", sa.String(128), nullable=False),
        sa.Column("country", sa.String(128), nullable=False),
        sa.Column("budget", sa.String(128), nullable=True),
        sa.Column("quantity", sa.String(128), nullable=True),
        sa.Column("timeline", sa.String(128), nullable=True),
        sa.Column("specifications", JSONB, nullable=False, server_default=sa.text("'{}'")),
        sa.Column("contact_info", JSONB, nullable=False, server_default=sa.text("'{}'")),
        sa.Column("status", suggestion_status, nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_trade_suggestions_user_id", "trade_suggestions", ["user_id"])
    op.create_index(
        "ix_trade_suggestions_status_created_at", "trade_suggestions", ["status", "created_at"]
    )
    op.create_index("ix_trade_suggestions_type_status", "trade_suggestions", ["type", "status"])


def downgrade() -> None:
    op.drop_table("trade_suggestions")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("users")
    bind = op.get_bind()
    for enum_type in reversed(_ENUMS):
        enum_type.drop(bind, checkfirst=True)
