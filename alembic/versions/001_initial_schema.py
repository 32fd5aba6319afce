"""initial schema: scorelists and users

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

JSON_DOCUMENT = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("token", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_token", "users", ["token"])

    op.create_table(
        "scorelists",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("owner", sa.String(), nullable=True),
        sa.Column("score", sa.Float(), nullable=False),
        sa.Column("score_is_integer", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("attributes_jsonb", JSON_DOCUMENT, nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_scorelists_owner", "scorelists", ["owner"])
    op.create_index("ix_scorelists_score", "scorelists", ["score"])
    op.create_index("ix_scorelists_created_at", "scorelists", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_scorelists_created_at", table_name="scorelists")
    op.drop_index("ix_scorelists_score", table_name="scorelists")
    op.drop_index("ix_scorelists_owner", table_name="scorelists")
    op.drop_table("scorelists")

    op.drop_index("ix_users_token", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
