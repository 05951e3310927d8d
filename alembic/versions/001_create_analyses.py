"""Cria tabela analyses para as análises salvas do conselho."""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "analyses",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        sa.Column("idea_text", sa.Text, nullable=False),
        sa.Column("strategist", postgresql.JSONB, nullable=False),
        sa.Column("financier", postgresql.JSONB, nullable=False),
        sa.Column("auditor", postgresql.JSONB, nullable=False),
        sa.Column("analyst", postgresql.JSONB, nullable=False),
        sa.Column("moderator", postgresql.JSONB, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
    )
    op.create_index("idx_analyses_created", "analyses", ["created_at"])
    op.create_index("idx_analyses_user", "analyses", ["user_id"])


def downgrade() -> None:
    op.drop_table("analyses")
