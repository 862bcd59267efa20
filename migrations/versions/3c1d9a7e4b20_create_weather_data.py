"""Create weather_data table

Revision ID: 3c1d9a7e4b20
Revises:
Create Date: 2026-10-16 09:12:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1d9a7e4b20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'weather_data',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('city', sa.String(length=128), nullable=False),
        sa.Column('temperature', sa.Float(), nullable=False),
        sa.Column('humidity', sa.Float(), nullable=False),
        sa.Column('pressure', sa.Float(), nullable=False),
        sa.Column('description', sa.String(length=256), nullable=False),
        sa.Column('wind_speed', sa.Float(), nullable=False),
        sa.Column('visibility', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('uq_weather_data_city_lower', 'weather_data', [sa.text('lower(city)')], unique=True)


def downgrade():
    op.drop_index('uq_weather_data_city_lower', table_name='weather_data')
    op.drop_table('weather_data')
