"""Create key-value table holding ledger snapshots."""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "001_create_state_snapshots"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Apply schema upgrades."""
    op.create_table(
        "state_snapshots",
        sa.Column("key", sa.String(length=120), primary_key=True, nullable=False),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    """Revert schema upgrades."""
    op.drop_table("state_snapshots")
