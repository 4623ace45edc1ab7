"""create exercise templates, workouts, workout exercises, sets

Revision ID: 4b1e9c2d7a10
Revises:
Create Date: 2026-10-18 10:12:03.118204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# define the enum type once so we can create/drop it explicitly
muscle_group = sa.Enum('push', 'pull', 'legs', name='muscle_group')


# revision identifiers, used by Alembic.
revision: str = '4b1e9c2d7a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) catalog
    op.create_table(
        'exercise_templates',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('muscle_group', muscle_group, nullable=False, index=True),
        sa.Column('rest_seconds', sa.Integer(), nullable=False, server_default='90'),
        sa.Column('personal_best', sa.Float(), nullable=True),
    )

    # 2) workouts
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('started_at', sa.DateTime(), nullable=False, index=True),
        sa.Column('ended_at', sa.DateTime(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
    )

    # 3) one row per exercise touched in a workout
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('template_id', sa.Integer(), sa.ForeignKey('exercise_templates.id'), nullable=False, index=True),
        sa.UniqueConstraint('workout_id', 'template_id', name='uq_workout_template'),
    )

    # 4) logged sets
    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_exercise_id', sa.Integer(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False, server_default='0'),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.true()),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('exercise_sets')
    op.drop_table('workout_exercises')
    op.drop_table('workouts')
    op.drop_table('exercise_templates')

    # finally drop enum type (no-op on backends without native enums)
    muscle_group.drop(op.get_bind(), checkfirst=True)
