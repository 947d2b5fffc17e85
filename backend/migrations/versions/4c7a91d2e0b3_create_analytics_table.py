"""create analytics event table

Revision ID: 4c7a91d2e0b3
Revises: 
Create Date: 2025-11-03 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4c7a91d2e0b3'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'analytics' in insp.get_table_names():
        return
    op.create_table(
        'analytics',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('event_type', sa.String(length=32), nullable=False),
        sa.Column('metadata', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_analytics_event_type', 'analytics', ['event_type'])
    op.create_index('ix_analytics_created_at', 'analytics', ['created_at'])


def downgrade():
    op.drop_index('ix_analytics_created_at', table_name='analytics')
    op.drop_index('ix_analytics_event_type', table_name='analytics')
    op.drop_table('analytics')
