"""create_scores

Revision ID: 3f1c2b7d9a10
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2b7d9a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('scores',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(255), nullable=False, server_default='guest'),
        sa.Column('user_name', sa.String(100), nullable=False, server_default='Anonym'),
        sa.Column('user_image', sa.String(500), nullable=True),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('total', sa.Integer(), nullable=False),
        sa.Column('percentage', sa.Float(), nullable=False),
        sa.Column('time', sa.Float(), nullable=False, server_default='0'),
        sa.Column('mode', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_scores_id', 'scores', ['id'])
    op.create_index('ix_scores_user_id', 'scores', ['user_id'])
    op.create_index('ix_scores_mode', 'scores', ['mode'])
    op.create_index('ix_scores_mode_percentage', 'scores', ['mode', 'percentage'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_scores_mode_percentage', table_name='scores')
    op.drop_index('ix_scores_mode', table_name='scores')
    op.drop_index('ix_scores_user_id', table_name='scores')
    op.drop_index('ix_scores_id', table_name='scores')
    op.drop_table('scores')
