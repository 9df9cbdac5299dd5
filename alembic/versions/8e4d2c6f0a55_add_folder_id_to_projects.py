"""add folderId to projects

Revision ID: 8e4d2c6f0a55
Revises: 3c1f9a2b7d10
Create Date: 2026-03-17 14:05:09.532871

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8e4d2c6f0a55'
down_revision: Union[str, Sequence[str], None] = '3c1f9a2b7d10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "projects",
        sa.Column(
            "folderId",
            sa.Text(),
            nullable=True
        )
    )


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table("projects") as batch_op:
        batch_op.drop_column("folderId")
