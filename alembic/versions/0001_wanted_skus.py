"""wanted skus catalog

Revision ID: 0001_wanted_skus
Revises:
Create Date: 2026-10-19 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "0001_wanted_skus"
down_revision = None
branch_labels = None
depends_on = None

SEED_SKUS = ["SKU2006-001", "SKU2006-002", "SKU2006-003"]

def upgrade():
    table = op.create_table(
        "wanted_skus",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("sku", sa.String(128), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_wanted_skus_sku", "wanted_skus", ["sku"])
    op.bulk_insert(table, [{"sku": sku} for sku in SEED_SKUS])

def downgrade():
    op.drop_index("ix_wanted_skus_sku", table_name="wanted_skus")
    op.drop_table("wanted_skus")
