"""Create vehicles table

Revision ID: 3c1f9a7b2d10
Revises:
Create Date: 2026-10-19 09:12:40.118305

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7b2d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "vehicles",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("brand", sa.String(length=50), nullable=False),
        sa.Column("reference", sa.String(length=120), nullable=False),
        sa.Column("price", sa.Numeric(precision=14, scale=0), nullable=False),
        sa.Column(
            "special_adjustment",
            sa.Numeric(precision=14, scale=0),
            nullable=False,
            server_default="0",
        ),
        sa.Column("displacement_cc", sa.Integer(), nullable=True),
        sa.Column(
            "categories",
            postgresql.ARRAY(sa.String(length=60)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("category", sa.String(length=60), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("vehicles")
