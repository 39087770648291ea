"""Initial migration

Revision ID: 001
Revises: 
Create Date: 2025-01-15 00:00:00.000000

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

reservation_category = postgresql.ENUM(
    'lunch', 'dinner', 'special', 'walk_in',
    name='reservation_category',
    create_type=False,
)
reservation_status = postgresql.ENUM(
    'pending', 'confirmed', 'seated', 'completed', 'cancelled', 'no_show',
    name='reservation_status',
    create_type=False,
)
reservation_source = postgresql.ENUM(
    'phone', 'web', 'walk_in', 'email', 'other',
    name='reservation_source',
    create_type=False,
)


def upgrade() -> None:
    bind = op.get_bind()
    reservation_category.create(bind, checkfirst=True)
    reservation_status.create(bind, checkfirst=True)
    reservation_source.create(bind, checkfirst=True)

    # Create reservations table
    op.create_table(
        'reservations',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('table_ids', postgresql.JSONB()),
        sa.Column('customer', postgresql.JSONB(), nullable=False),
        sa.Column('party_size', sa.Integer(), nullable=False),
        sa.Column('category', reservation_category, nullable=False),
        sa.Column('status', reservation_status, nullable=False, server_default='pending'),
        sa.Column('notes', sa.Text()),
        sa.Column('tags', postgresql.JSONB()),
        sa.Column('created_by', sa.String(255), nullable=False),
        sa.Column('source', reservation_source),
        sa.Column('confirmed_at', sa.DateTime()),
        sa.Column('seated_at', sa.DateTime()),
        sa.Column('completed_at', sa.DateTime()),
        sa.Column('cancelled_at', sa.DateTime()),
        sa.Column('cancelled_by', sa.String(255)),
        sa.Column('cancellation_reason', sa.Text()),
    )
    op.create_index('ix_reservations_date', 'reservations', ['date'])


def downgrade() -> None:
    op.drop_index('ix_reservations_date', table_name='reservations')
    op.drop_table('reservations')

    bind = op.get_bind()
    reservation_source.drop(bind, checkfirst=True)
    reservation_status.drop(bind, checkfirst=True)
    reservation_category.drop(bind, checkfirst=True)
