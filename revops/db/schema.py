"""SQLAlchemy Core table definitions mirrored by Alembic migrations."""

import sqlalchemy as sa

db_metadata = sa.MetaData()

activity_table = sa.Table(
    "activity",
    db_metadata,
    sa.Column("activity_id", sa.Uuid(as_uuid=True), primary_key=True),
    sa.Column("activity", sa.Text(), nullable=False),
    sa.Column("category", sa.Text(), nullable=False),
    sa.Column("price", sa.Integer(), nullable=False),
    sa.Column("image_location", sa.Text(), nullable=True),
    sa.Column("created_date", sa.Date(), nullable=False),
    sa.Column("created_time", sa.Time(), nullable=False),
    sa.Column("last_updated_by", sa.Text(), nullable=False),
    sa.Column("accessed_by", sa.Text(), nullable=False),
    sa.CheckConstraint("price >= 0", name="ck_activity_price_non_negative"),
    sa.Index("ix_activity_category", "category"),
)
