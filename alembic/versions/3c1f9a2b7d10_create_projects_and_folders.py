"""create projects and folders

Revision ID: 3c1f9a2b7d10
Revises:
Create Date: 2026-02-03 10:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a2b7d10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "projects",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False, server_default=sa.text("'Untitled QR'")),
        sa.Column("createdAt", sa.String(), nullable=False),
        sa.Column("updatedAt", sa.String(), nullable=False),
        sa.Column("originalUrl", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("shortenEnabled", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("shortUrl", sa.Text(), nullable=True),
        sa.Column("recipeJson", sa.Text(), nullable=False, server_default=sa.text("'{}'")),
        sa.Column("logoFilename", sa.Text(), nullable=True),
    )
    op.create_table(
        "folders",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(), nullable=False, server_default=sa.text("'Folder'")),
        sa.Column("sortOrder", sa.Integer(), nullable=False, server_default=sa.text("0")),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("folders")
    op.drop_table("projects")
