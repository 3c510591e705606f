"""Create record tables

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

Creates financial_histories, associated_files and associated_histories.
The three tables share one column layout (see recordbook/models/records.py)
and differ only in their foreign-key column.

Rollback: downgrade() drops the three tables (all record data is lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

# (table, foreign-key column)
RECORD_TABLES = (
    ("financial_histories", "financial_id"),
    ("associated_files", "associate_id"),
    ("associated_histories", "history_id"),
)


def _record_columns(foreign_key: str) -> list:
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(foreign_key, sa.Integer(), nullable=False),
        sa.Column("document", sa.Text(), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("created_by", sa.String(255), nullable=True),
        sa.Column("updated_by", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.PrimaryKeyConstraint("id"),
    ]


def upgrade() -> None:
    for table, foreign_key in RECORD_TABLES:
        op.create_table(table, *_record_columns(foreign_key))
        # Naming matches SQLAlchemy's default for index=True columns
        op.create_index(f"ix_{table}_{foreign_key}", table, [foreign_key])


def downgrade() -> None:
    for table, foreign_key in reversed(RECORD_TABLES):
        op.drop_index(f"ix_{table}_{foreign_key}", table_name=table)
        op.drop_table(table)
