"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create intake_submissions table
    op.create_table(
        'intake_submissions',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=320), nullable=False),
        sa.Column('phone', sa.String(length=50), nullable=True),
        sa.Column('state', sa.String(length=255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('sex', sa.String(length=255), nullable=True),
        sa.Column('bmi', sa.String(length=10), nullable=True),
        sa.Column('annual_income', sa.Integer(), nullable=True),
        sa.Column('coverage', sa.Integer(), nullable=True),
        sa.Column('product_type', sa.String(length=255), nullable=True),
        sa.Column('intake_data', postgresql.JSONB(astext_type=sa.Text()), nullable=False, server_default=sa.text("'{}'::jsonb")),
        sa.Column('carrier_analysis', sa.Text(), nullable=True),
        sa.Column('carrier_results', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
    )
    op.create_index('ix_intake_submissions_email', 'intake_submissions', ['email'])
    op.create_index('ix_intake_submissions_created_at', 'intake_submissions', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_intake_submissions_created_at', table_name='intake_submissions')
    op.drop_index('ix_intake_submissions_email', table_name='intake_submissions')
    op.drop_table('intake_submissions')
