"""create users, daily_logs and weekly_photos

Revision ID: 3e1c9a7d2b40
Revises: 
Create Date: 2025-12-01 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e1c9a7d2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('height_cm', sa.Numeric(5, 1), nullable=True),
        sa.Column('weight_goal', sa.Numeric(5, 2), nullable=True),
        sa.Column('steps_goal', sa.Integer(), nullable=True),
        sa.Column('water_goal_liters', sa.Numeric(4, 2), nullable=True),
        sa.Column('workout_days_goal', sa.Integer(), nullable=True),
        sa.Column('sleep_goal_hours', sa.Numeric(3, 1), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'daily_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('weight', sa.Numeric(5, 2), nullable=True),
        sa.Column('steps', sa.Integer(), nullable=True),
        sa.Column('calories', sa.Integer(), nullable=True),
        sa.Column('water_liters', sa.Numeric(4, 2), nullable=True),
        sa.Column('workout_done', sa.Boolean(), nullable=True),
        sa.Column('workout_type', sa.String(length=40), nullable=True),
        sa.Column('wake_time', sa.Time(), nullable=True),
        sa.Column('sleep_time', sa.Time(), nullable=True),
        sa.Column('notes', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'date', name='uq_daily_logs_user_date'),
    )
    op.create_index('ix_daily_logs_id', 'daily_logs', ['id'])
    op.create_index('ix_daily_logs_user_id', 'daily_logs', ['user_id'])

    op.create_table(
        'weekly_photos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('week_start', sa.Date(), nullable=False),
        sa.Column('image_url', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_weekly_photos_id', 'weekly_photos', ['id'])
    op.create_index('ix_weekly_photos_user_id', 'weekly_photos', ['user_id'])
    op.create_index('ix_weekly_photos_week_start', 'weekly_photos', ['week_start'])


def downgrade() -> None:
    op.drop_table('weekly_photos')
    op.drop_table('daily_logs')
    op.drop_table('users')
