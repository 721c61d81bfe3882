"""initial tables

Revision ID: 4f2a9c1d7b3e
Revises:
Create Date: 2026-10-19 09:12:31.204417

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2a9c1d7b3e'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_users_username'), ['username'], unique=True)

    op.create_table('hydration_tips',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('tip', sa.Text(), nullable=False),
        sa.Column('category', sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('hydration_tips', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_hydration_tips_category'), ['category'], unique=False)

    op.create_table('settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('daily_goal', sa.Float(), nullable=False),
        sa.Column('default_cup_size', sa.Integer(), nullable=False),
        sa.Column('sound_enabled', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )

    op.create_table('water_intake',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.CheckConstraint('amount > 0'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('water_intake', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_water_intake_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_water_intake_timestamp'), ['timestamp'], unique=False)
        batch_op.create_index('idx_water_intake_user_timestamp', ['user_id', 'timestamp'], unique=False)

    op.create_table('reminder_settings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
        sa.Column('interval', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.String(length=5), nullable=False),
        sa.Column('end_time', sa.String(length=5), nullable=False),
        sa.Column('monday', sa.Boolean(), nullable=False),
        sa.Column('tuesday', sa.Boolean(), nullable=False),
        sa.Column('wednesday', sa.Boolean(), nullable=False),
        sa.Column('thursday', sa.Boolean(), nullable=False),
        sa.Column('friday', sa.Boolean(), nullable=False),
        sa.Column('saturday', sa.Boolean(), nullable=False),
        sa.Column('sunday', sa.Boolean(), nullable=False),
        sa.Column('notifications_enabled', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )

    op.create_table('streaks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('current_streak', sa.Integer(), nullable=False),
        sa.Column('longest_streak', sa.Integer(), nullable=False),
        sa.Column('last_updated', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id')
    )

    op.create_table('achievements',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('threshold_value', sa.Integer(), nullable=False),
        sa.Column('achieved', sa.Boolean(), nullable=False),
        sa.Column('achieved_date', sa.DateTime(), nullable=True),
        sa.CheckConstraint("type IN ('intake','streak','logging')"),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'name', name='uq_achievement_user_name')
    )
    with op.batch_alter_table('achievements', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_achievements_user_id'), ['user_id'], unique=False)

    op.create_table('reminder_messages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('message', sa.String(length=200), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('reminder_messages', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_reminder_messages_user_id'), ['user_id'], unique=False)


def downgrade():
    op.drop_table('reminder_messages')
    op.drop_table('achievements')
    op.drop_table('streaks')
    op.drop_table('reminder_settings')
    op.drop_table('water_intake')
    op.drop_table('settings')
    op.drop_table('hydration_tips')
    op.drop_table('users')
