"""create medications, medication_doses, symptoms and user_settings tables

Revision ID: 3f1c9a2b7d40
Revises:
Create Date: 2026-10-19 10:12:44.518203
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c9a2b7d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'medications',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('dosage', sa.String(length=60), nullable=False),
        sa.Column('frequency', sa.String(length=60), nullable=False),
        sa.Column('times', sa.JSON(), nullable=False),              # ["08:00", "20:00"]
        sa.Column('requires_food', sa.Boolean(), nullable=False),
        sa.Column('empty_stomach', sa.Boolean(), nullable=False),
        sa.Column('food_reminder_minutes', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),       # soft delete flag
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_medications_is_active', 'medications', ['is_active'])

    op.create_table(
        'medication_doses',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('medication_id', sa.String(length=36), nullable=False),
        sa.Column('scheduled_time', sa.DateTime(), nullable=False),
        sa.Column('taken_time', sa.DateTime(), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False),  # pending/taken/late/missed
        sa.Column('date', sa.String(length=10), nullable=False),    # YYYY-MM-DD
        sa.ForeignKeyConstraint(['medication_id'], ['medications.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_medication_doses_medication_id', 'medication_doses', ['medication_id'])
    op.create_index('ix_medication_doses_date', 'medication_doses', ['date'])

    op.create_table(
        'symptoms',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('severity', sa.Integer(), nullable=False),        # 1-5
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.Column('date', sa.String(length=10), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_symptoms_timestamp', 'symptoms', ['timestamp'])
    op.create_index('ix_symptoms_date', 'symptoms', ['date'])

    op.create_table(
        'user_settings',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('emergency_contact_name', sa.String(length=120), nullable=True),
        sa.Column('emergency_contact_phone', sa.String(length=40), nullable=True),
        sa.Column('doctor_name', sa.String(length=120), nullable=True),
        sa.Column('doctor_phone', sa.String(length=40), nullable=True),
        sa.Column('notifications_enabled', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('user_settings')
    op.drop_index('ix_symptoms_date', table_name='symptoms')
    op.drop_index('ix_symptoms_timestamp', table_name='symptoms')
    op.drop_table('symptoms')
    op.drop_index('ix_medication_doses_date', table_name='medication_doses')
    op.drop_index('ix_medication_doses_medication_id', table_name='medication_doses')
    op.drop_table('medication_doses')
    op.drop_index('ix_medications_is_active', table_name='medications')
    op.drop_table('medications')
