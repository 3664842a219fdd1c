"""add users, snippets and snippet_tags tables

Revision ID: 7d1e0c2a9b34
Revises:
Create Date: 2026-10-19

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "7d1e0c2a9b34"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, snippets and snippet_tags."""
    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "snippets",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("owner_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("code", sa.Text(), nullable=False),
        sa.Column("programming_language", sa.String(length=32), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_snippets_owner_id", "snippets", ["owner_id"], unique=False)
    op.create_index(
        "ix_snippets_programming_language",
        "snippets",
        ["programming_language"],
        unique=False,
    )
    op.create_index(
        "ix_snippets_owner_id_created_at",
        "snippets",
        ["owner_id", sa.text("created_at DESC")],
        unique=False,
    )

    op.create_table(
        "snippet_tags",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
        ),
        sa.Column("snippet_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.ForeignKeyConstraint(["snippet_id"], ["snippets.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("snippet_id", "name", name="uq_snippet_tags_snippet_name"),
    )
    op.create_index(
        "ix_snippet_tags_snippet_id", "snippet_tags", ["snippet_id"], unique=False
    )
    op.create_index("ix_snippet_tags_name", "snippet_tags", ["name"], unique=False)


def downgrade() -> None:
    """Drop snippet_tags, snippets and users."""
    op.drop_index("ix_snippet_tags_name", table_name="snippet_tags")
    op.drop_index("ix_snippet_tags_snippet_id", table_name="snippet_tags")
    op.drop_table("snippet_tags")
    op.drop_index("ix_snippets_owner_id_created_at", table_name="snippets")
    op.drop_index("ix_snippets_programming_language", table_name="snippets")
    op.drop_index("ix_snippets_owner_id", table_name="snippets")
    op.drop_table("snippets")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
