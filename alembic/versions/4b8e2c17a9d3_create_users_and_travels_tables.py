"""create_users_and_travels_tables

Revision ID: 4b8e2c17a9d3
Revises: 
Create Date: 2026-10-19 09:12:41.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b8e2c17a9d3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(50), nullable=False),
        sa.Column("password", sa.String(100), nullable=False),
        sa.Column("role", sa.String(10), nullable=False),
        sa.CheckConstraint("role IN ('admin', 'driver')", name="chk_users_role"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # Points are stored as "<lat>, <lng>" text
    op.create_table(
        "travels",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", name="fk_travels_user_id_users")),
        sa.Column("from", sa.String(50), nullable=False),
        sa.Column("to", sa.String(50), nullable=False),
        sa.Column("status", sa.String(15), nullable=False, server_default="pending"),
        sa.CheckConstraint("status IN ('pending', 'in_process', 'ready')", name="chk_travels_status"),
        sa.CheckConstraint("status = 'pending' OR user_id IS NOT NULL", name="chk_travels_assigned"),
    )

    op.create_index("idx_travels_user_id", "travels", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_travels_user_id", table_name="travels")
    op.drop_table("travels")
    op.drop_table("users")
