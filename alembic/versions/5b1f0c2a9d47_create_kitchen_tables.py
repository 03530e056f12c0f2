"""create_kitchen_tables

Revision ID: 5b1f0c2a9d47
Revises:
Create Date: 2026-10-19 10:12:41.208113
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1f0c2a9d47'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    # LOCATIONS
    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False, unique=True),
    )
    op.create_index("ix_locations_id", "locations", ["id"], unique=False)

    # PRODUCTS
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("ean13", sa.String(length=13), nullable=True),
        sa.Column("product_code", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.CheckConstraint(
            "(ean13 IS NULL) <> (product_code IS NULL)",
            name="ck_product_single_identifier",
        ),
    )
    op.create_index("ix_products_id", "products", ["id"], unique=False)
    op.create_index("ix_products_ean13", "products", ["ean13"], unique=False)
    op.create_index("ix_products_product_code", "products", ["product_code"], unique=False)

    # TAGS
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
    )
    op.create_index("ix_tags_id", "tags", ["id"], unique=False)
    op.create_index("ix_tags_name", "tags", ["name"], unique=True)

    # PRODUCT TAGS
    op.create_table(
        "product_tags",
        sa.Column(
            "product_id",
            sa.Integer(),
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "tag_id",
            sa.Integer(),
            sa.ForeignKey("tags.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    op.create_index("ix_product_tags_tag_id", "product_tags", ["tag_id"], unique=False)

    # ITEMS
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("location_id", sa.Integer(), sa.ForeignKey("locations.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("expiration_date", sa.Date(), nullable=True),
        sa.Column("frozen_date", sa.Date(), nullable=True),
        sa.CheckConstraint("quantity >= 0", name="ck_item_quantity_non_negative"),
    )
    op.create_index("ix_items_id", "items", ["id"], unique=False)
    op.create_index("ix_items_product_id", "items", ["product_id"], unique=False)
    op.create_index("ix_items_location_id", "items", ["location_id"], unique=False)
    op.create_index(
        "ix_items_location_expiration",
        "items",
        ["location_id", "expiration_date"],
        unique=False,
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_items_location_expiration", table_name="items")
    op.drop_index("ix_items_location_id", table_name="items")
    op.drop_index("ix_items_product_id", table_name="items")
    op.drop_index("ix_items_id", table_name="items")
    op.drop_table("items")
    op.drop_index("ix_product_tags_tag_id", table_name="product_tags")
    op.drop_table("product_tags")
    op.drop_index("ix_tags_name", table_name="tags")
    op.drop_index("ix_tags_id", table_name="tags")
    op.drop_table("tags")
    op.drop_index("ix_products_product_code", table_name="products")
    op.drop_index("ix_products_ean13", table_name="products")
    op.drop_index("ix_products_id", table_name="products")
    op.drop_table("products")
    op.drop_index("ix_locations_id", table_name="locations")
    op.drop_table("locations")
