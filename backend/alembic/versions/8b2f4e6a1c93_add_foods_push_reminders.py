"""add foods, push_subscriptions, reminders_log and users.dark_mode

Revision ID: 8b2f4e6a1c93
Revises: 3e1c9a7d2b40
Create Date: 2025-12-08 20:15:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8b2f4e6a1c93'
down_revision: Union[str, Sequence[str], None] = '3e1c9a7d2b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    if 'foods' not in tables:
        op.create_table(
            'foods',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('calories_per_unit', sa.Numeric(7, 2), nullable=False),
            sa.Column('protein_per_unit', sa.Numeric(7, 2), nullable=False, server_default='0'),
            sa.Column('carbs_per_unit', sa.Numeric(7, 2), nullable=False, server_default='0'),
            sa.Column('unit', sa.String(length=20), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_foods_id', 'foods', ['id'])
        op.create_index('ix_foods_name', 'foods', ['name'])

    if 'push_subscriptions' not in tables:
        op.create_table(
            'push_subscriptions',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('endpoint', sa.String(), nullable=False),
            sa.Column('p256dh', sa.String(), nullable=False),
            sa.Column('auth', sa.String(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
            sa.UniqueConstraint('user_id', 'endpoint', name='uq_push_user_endpoint'),
        )
        op.create_index('ix_push_subscriptions_id', 'push_subscriptions', ['id'])
        op.create_index('ix_push_subscriptions_user_id', 'push_subscriptions', ['user_id'])

    if 'reminders_log' not in tables:
        op.create_table(
            'reminders_log',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
            sa.Column('type', sa.String(length=10), nullable=False),
            sa.Column('sent_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
        op.create_index('ix_reminders_log_id', 'reminders_log', ['id'])
        op.create_index('ix_reminders_log_user_id', 'reminders_log', ['user_id'])

    op.add_column(
        'users',
        sa.Column('dark_mode', sa.Boolean(), nullable=False, server_default=sa.false()),
    )


def downgrade() -> None:
    op.drop_column('users', 'dark_mode')
    # Safe drop if exists
    op.execute('DROP TABLE IF EXISTS reminders_log')
    op.execute('DROP TABLE IF EXISTS push_subscriptions')
    op.execute('DROP TABLE IF EXISTS foods')
