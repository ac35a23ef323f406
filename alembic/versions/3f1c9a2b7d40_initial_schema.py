"""initial_schema

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19 09:12:44.518203
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _inventory_table(name: str):
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("make", sa.String(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("unit_color", sa.String(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("price >= 0", name=f"ck_{name}_price_non_negative"),
    )
    op.create_index(f"ix_{name}_id", name, ["id"], unique=False)
    op.create_index(f"ix_{name}_created_at", name, ["created_at"], unique=False)


def upgrade() -> None:
    """Upgrade schema."""

    # INVENTORY
    _inventory_table("multicabs")
    _inventory_table("accessories")

    op.create_table(
        "materials",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("supplier", sa.String(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("image", sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_materials_id", "materials", ["id"], unique=False)
    op.create_index("ix_materials_category", "materials", ["category"], unique=False)
    op.create_index("ix_materials_created_at", "materials", ["created_at"], unique=False)

    # CUSTOMERS
    op.create_table(
        "customers",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("phone", sa.String(), nullable=True),
        sa.Column("address", sa.String(), nullable=True),
        sa.Column("date_registered", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_customers_email", "customers", ["email"], unique=True)

    # SALES
    op.create_table(
        "sales",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("customer_id", sa.String(36), nullable=False),
        sa.Column("sold_by", sa.String(), nullable=False),
        sa.Column("sale_date", sa.Date(), nullable=False),
        sa.Column("total_price", sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_sales_customer_id", "sales", ["customer_id"], unique=False)
    op.create_index("ix_sales_sale_date", "sales", ["sale_date"], unique=False)
    op.create_index("ix_sales_created_at", "sales", ["created_at"], unique=False)
    op.create_index(
        "ix_sales_customer_created",
        "sales",
        ["customer_id", "created_at"],
        unique=False,
    )

    # SALE ITEMS
    op.create_table(
        "sale_items",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "sale_id",
            sa.String(36),
            sa.ForeignKey("sales.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("item_type", sa.String(16), nullable=False),
        sa.Column("multi_cab_id", sa.Integer(), nullable=True),
        sa.Column("accessory_id", sa.Integer(), nullable=True),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("unit_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("subtotal", sa.Numeric(12, 2), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("quantity > 0", name="ck_sale_items_quantity_positive"),
        sa.CheckConstraint(
            "item_type IN ('cab', 'accessory')",
            name="ck_sale_items_item_type",
        ),
        sa.CheckConstraint(
            "(item_type = 'cab' AND multi_cab_id IS NOT NULL AND accessory_id IS NULL)"
            " OR (item_type = 'accessory' AND accessory_id IS NOT NULL AND multi_cab_id IS NULL)",
            name="ck_sale_items_single_reference",
        ),
    )
    op.create_index("ix_sale_items_sale_id", "sale_items", ["sale_id"], unique=False)
    op.create_index("ix_sale_items_multi_cab_id", "sale_items", ["multi_cab_id"], unique=False)
    op.create_index("ix_sale_items_accessory_id", "sale_items", ["accessory_id"], unique=False)

    # USERS
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # ACTIVITY LOGS
    op.create_table(
        "activity_logs",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("timestamp", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("action_type", sa.String(), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("is_system_action", sa.Boolean(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_activity_logs_timestamp", "activity_logs", ["timestamp"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_activity_logs_timestamp", table_name="activity_logs")
    op.drop_table("activity_logs")

    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")

    op.drop_index("ix_sale_items_accessory_id", table_name="sale_items")
    op.drop_index("ix_sale_items_multi_cab_id", table_name="sale_items")
    op.drop_index("ix_sale_items_sale_id", table_name="sale_items")
    op.drop_table("sale_items")

    op.drop_index("ix_sales_customer_created", table_name="sales")
    op.drop_index("ix_sales_created_at", table_name="sales")
    op.drop_index("ix_sales_sale_date", table_name="sales")
    op.drop_index("ix_sales_customer_id", table_name="sales")
    op.drop_table("sales")

    op.drop_index("ix_customers_email", table_name="customers")
    op.drop_table("customers")

    op.drop_index("ix_materials_created_at", table_name="materials")
    op.drop_index("ix_materials_category", table_name="materials")
    op.drop_index("ix_materials_id", table_name="materials")
    op.drop_table("materials")

    for name in ("accessories", "multicabs"):
        op.drop_index(f"ix_{name}_created_at", table_name=name)
        op.drop_index(f"ix_{name}_id", table_name=name)
        op.drop_table(name)
