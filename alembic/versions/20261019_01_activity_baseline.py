"""Activity table baseline

Revision ID: 20261019_01
Revises:
Create Date: 2026-10-19
"""
# pylint: disable=no-member,invalid-name,wrong-import-order

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "20261019_01"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "activity",
        sa.Column("activity_id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("activity", sa.Text(), nullable=False),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("image_location", sa.Text(), nullable=True),
        sa.Column("created_date", sa.Date(), nullable=False, server_default=sa.text("CURRENT_DATE")),
        sa.Column("created_time", sa.Time(), nullable=False, server_default=sa.text("LOCALTIME(0)")),
        sa.Column("last_updated_by", sa.Text(), nullable=False),
        sa.Column("accessed_by", sa.Text(), nullable=False),
        sa.CheckConstraint("price >= 0", name="ck_activity_price_non_negative"),
    )
    op.create_index("ix_activity_category", "activity", ["category"])


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_activity_category", table_name="activity")
    op.drop_table("activity")
