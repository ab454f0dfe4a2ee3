"""Add skills, availability and interest_areas to volunteers.

Databases restored from older dumps may already carry some of these columns,
so each one is added only when missing. Offline (--sql) runs cannot inspect
the table and emit every ADD/DROP COLUMN unconditionally.

Revision ID: 20250615000000
Revises: 20250601000000
Create Date: 2025-06-15

"""
from typing import Sequence, Union

from alembic import context, op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "20250615000000"
down_revision: Union[str, None] = "20250601000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

NEW_COLUMNS = (
    ("skills", sa.Text()),
    ("availability", sa.String(length=255)),
    ("interest_areas", postgresql.JSONB(astext_type=sa.Text())),
)


def _existing_columns(table: str) -> set[str] | None:
    """Column names of ``table``, or None when generating SQL offline (no connection to inspect)."""
    if context.is_offline_mode():
        return None
    inspector = sa.inspect(op.get_bind())
    return {col["name"] for col in inspector.get_columns(table)}


def upgrade() -> None:
    existing = _existing_columns("volunteers")
    for name, type_ in NEW_COLUMNS:
        if existing is None or name not in existing:
            op.add_column("volunteers", sa.Column(name, type_, nullable=True))


def downgrade() -> None:
    existing = _existing_columns("volunteers")
    for name, _ in reversed(NEW_COLUMNS):
        if existing is None or name in existing:
            op.drop_column("volunteers", name)
