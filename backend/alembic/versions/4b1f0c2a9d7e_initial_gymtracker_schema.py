"""initial gymtracker schema: users, exercise definitions, templates, workouts

Revision ID: 4b1f0c2a9d7e
Revises:
Create Date: 2026-10-18 09:12:40.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1f0c2a9d7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('username', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    # 2) exercise_definitions, name unique per owner
    op.create_table(
        'exercise_definitions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), nullable=False, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.UniqueConstraint('user_id', 'name', name='uq_exercise_definitions_user_name'),
    )

    # 3) workout_templates + link rows (no FK to exercise_definitions)
    op.create_table(
        'workout_templates',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), nullable=False, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_table(
        'template_exercises',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('template_id', sa.String(length=36), sa.ForeignKey('workout_templates.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_definition_id', sa.Text(), nullable=False),
    )

    # 4) workout_sessions -> completed_exercises -> exercise_sets
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), nullable=False, index=True),
        sa.Column('date', sa.Text(), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_table(
        'completed_exercises',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('session_id', sa.String(length=36), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_definition_id', sa.Text(), nullable=False, index=True),
        sa.Column('exercise_name', sa.Text(), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
    )
    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('completed_exercise_id', sa.String(length=36), sa.ForeignKey('completed_exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False, server_default='0'),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('exercise_sets')
    op.drop_table('completed_exercises')
    op.drop_table('workout_sessions')
    op.drop_table('template_exercises')
    op.drop_table('workout_templates')
    op.drop_table('exercise_definitions')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
